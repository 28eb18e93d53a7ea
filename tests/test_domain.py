import pytest
from pydantic import ValidationError

from help_articles.domain import (
    Article,
    ArticlesResponse,
    ServerError,
    Unknown,
    newest_first,
)
from helpers import make_article


def test_article_is_immutable():
    article = make_article("1")

    with pytest.raises(ValidationError):
        article.title = "changed"


def test_article_requires_non_empty_id():
    with pytest.raises(ValidationError):
        Article(id="", title="t", summary="s", content="c", lastUpdatedTimestamp=1)


def test_wire_shape_uses_camel_case():
    parsed = ArticlesResponse.model_validate(
        {"articles": [{"id": "1", "title": "t", "summary": "s", "content": "c", "lastUpdatedTimestamp": 5, "extra": 1}]}
    )

    assert parsed.articles[0].last_updated_timestamp == 5
    assert parsed.articles[0].model_dump(by_alias=True)["lastUpdatedTimestamp"] == 5


def test_newest_first():
    ordered = newest_first([make_article("a", 1), make_article("b", 3), make_article("c", 2)])

    assert [a.id for a in ordered] == ["b", "c", "a"]


def test_error_messages():
    assert ServerError(503).message == "Server error (503). Please try again later."
    assert Unknown().message == "An unknown error occurred."
    assert Unknown(RuntimeError("boom")).message == "boom"
