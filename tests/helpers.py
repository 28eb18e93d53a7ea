from __future__ import annotations

from help_articles.domain import Article

NOW_MS = 1_700_000_000_000
HOUR_MS = 60 * 60 * 1000


class FakeClock:
    def __init__(self, now: int = NOW_MS):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


def make_article(article_id: str, updated: int = NOW_MS, title: str | None = None) -> Article:
    return Article(
        id=article_id,
        title=title or f"Title {article_id}",
        summary=f"Summary {article_id}",
        content=f"Content {article_id}",
        last_updated_timestamp=updated,
    )
