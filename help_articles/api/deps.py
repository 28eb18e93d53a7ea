from __future__ import annotations

from fastapi import Request

from help_articles.services.mock_backend import MockApiService
from help_articles.services.repository import ArticleRepository

def get_repository(request: Request) -> ArticleRepository:
    return request.app.state.repository

def get_mock_service(request: Request) -> MockApiService:
    return request.app.state.mock_service
