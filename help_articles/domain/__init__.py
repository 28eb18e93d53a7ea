from help_articles.domain.article import (
    Article,
    ArticleDetailResponse,
    ArticlesResponse,
    BackendErrorResponse,
    newest_first,
)
from help_articles.domain.errors import (
    BackendError,
    DataError,
    NetworkError,
    ParseError,
    ServerError,
    Timeout,
    Unknown,
)
from help_articles.domain.result import Failure, Result, Success

__all__ = [
    "Article",
    "ArticleDetailResponse",
    "ArticlesResponse",
    "BackendErrorResponse",
    "newest_first",
    "BackendError",
    "DataError",
    "NetworkError",
    "ParseError",
    "ServerError",
    "Timeout",
    "Unknown",
    "Failure",
    "Result",
    "Success",
]
