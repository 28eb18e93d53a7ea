from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Article(BaseModel):
    # Unknown fields are ignored so newer backends don't break older clients
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str = Field(min_length=1)
    title: str
    summary: str
    content: str
    last_updated_timestamp: int = Field(alias="lastUpdatedTimestamp")


class ArticlesResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    articles: list[Article]


class ArticleDetailResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    article: Article


class BackendErrorResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    error_code: str = Field(alias="errorCode")
    error_title: str = Field(alias="errorTitle")
    error_message: str = Field(alias="errorMessage")


def newest_first(articles: list[Article]) -> list[Article]:
    return sorted(articles, key=lambda a: a.last_updated_timestamp, reverse=True)
