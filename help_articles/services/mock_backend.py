"""Simulated article backend.

Cycles through failure scenarios by call count so a client pointed at it
sees the whole error taxonomy over time:

- every 20th call: application-level error body
- every 15th call: HTTP 500
- every 10th call: response slower than the client timeout
- otherwise: success
"""
from __future__ import annotations

import enum
import time
from typing import Callable, Optional

from help_articles.domain import Article, ArticleDetailResponse, ArticlesResponse, BackendErrorResponse

HOUR_MS = 60 * 60 * 1000


class Scenario(str, enum.Enum):
    SUCCESS = "success"
    BACKEND_ERROR = "backend_error"
    SERVER_ERROR = "server_error"
    TIMEOUT = "timeout"


_SAMPLES = [
    (
        "1",
        "Getting Started with Help Articles",
        "Learn the basics of navigating and using our help system.",
        "# Getting Started\n\n"
        "Welcome to the help system. Tap any article title to read it, or use "
        "the search bar to filter by keyword.\n\n"
        "## Offline Mode\n"
        "Articles are cached for offline reading and refreshed every 24 hours "
        "while you are online.",
        2,
    ),
    (
        "2",
        "Account Management",
        "Manage your account settings, password, and preferences.",
        "# Account Management\n\n"
        "## Changing Your Password\n"
        "1. Open Settings\n2. Select \"Security\"\n3. Tap \"Change Password\"\n\n"
        "## Two-Factor Authentication\n"
        "Enable 2FA for an extra layer of protection.",
        5,
    ),
    (
        "3",
        "Troubleshooting Common Issues",
        "Solutions to frequently encountered problems and errors.",
        "# Troubleshooting Guide\n\n"
        "## Content Not Updating\n"
        "- Pull down on the article list to refresh\n"
        "- Check that background data is enabled\n\n"
        "## Still Having Problems?\n"
        "Contact support with details about your issue.",
        10,
    ),
    (
        "4",
        "Privacy Policy",
        "Understand how we collect, use, and protect your data.",
        "# Privacy Policy\n\n"
        "We collect anonymized usage statistics, device information for "
        "compatibility and cached content for offline access.\n\n"
        "You can request access to or deletion of your data at any time.",
        24,
    ),
    (
        "5",
        "Advanced Features",
        "Explore powerful features for experienced users.",
        "# Advanced Features\n\n"
        "## Background Sync\n"
        "Content refreshes in the background once a day when the device is "
        "online and the battery is not low.\n\n"
        "## Customization\n"
        "Adjust cache duration and auto-refresh behavior in Settings.",
        3,
    ),
]


class MockApiService:
    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock
        self._call_count = 0

    @property
    def call_count(self) -> int:
        return self._call_count

    def next_scenario(self) -> Scenario:
        self._call_count += 1
        n = self._call_count
        if n % 20 == 0:
            return Scenario.BACKEND_ERROR
        if n % 15 == 0:
            return Scenario.SERVER_ERROR
        if n % 10 == 0:
            return Scenario.TIMEOUT
        return Scenario.SUCCESS

    def articles(self) -> ArticlesResponse:
        now = int(self._clock() * 1000)
        return ArticlesResponse(
            articles=[
                Article(
                    id=id_,
                    title=title,
                    summary=summary,
                    content=content,
                    last_updated_timestamp=now - hours_ago * HOUR_MS,
                )
                for id_, title, summary, content, hours_ago in _SAMPLES
            ]
        )

    def article_detail(self, article_id: str) -> Optional[ArticleDetailResponse]:
        for article in self.articles().articles:
            if article.id == article_id:
                return ArticleDetailResponse(article=article)
        return None

    @staticmethod
    def backend_error() -> BackendErrorResponse:
        return BackendErrorResponse(
            errorCode="ARTICLE_NOT_FOUND",
            errorTitle="Article Not Found",
            errorMessage="The requested article could not be found. It may have been deleted or moved.",
        )

    @staticmethod
    def not_found(article_id: str) -> BackendErrorResponse:
        return BackendErrorResponse(
            errorCode="NOT_FOUND",
            errorTitle="Not Found",
            errorMessage=f"Article with ID {article_id} not found",
        )
