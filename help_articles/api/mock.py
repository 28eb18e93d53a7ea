from __future__ import annotations

import asyncio

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from help_articles.api.deps import get_mock_service
from help_articles.core.config import settings
from help_articles.services.mock_backend import MockApiService, Scenario

router = APIRouter(prefix="/mock", tags=["mock"])

async def _failure_for(scenario: Scenario, service: MockApiService) -> JSONResponse | None:
    if scenario is Scenario.TIMEOUT:
        # Outlast the client's request timeout
        await asyncio.sleep(settings.request_timeout_seconds + 1)
        return JSONResponse(status_code=504, content={"detail": "Upstream timeout"})
    if scenario is Scenario.SERVER_ERROR:
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})
    if scenario is Scenario.BACKEND_ERROR:
        return JSONResponse(status_code=400, content=service.backend_error().model_dump(by_alias=True))
    return None

@router.get("/articles")
async def mock_articles(service: MockApiService = Depends(get_mock_service)):
    failure = await _failure_for(service.next_scenario(), service)
    if failure is not None:
        return failure
    return service.articles().model_dump(by_alias=True)

@router.get("/articles/{article_id}")
async def mock_article_detail(article_id: str, service: MockApiService = Depends(get_mock_service)):
    failure = await _failure_for(service.next_scenario(), service)
    if failure is not None:
        return failure
    detail = service.article_detail(article_id)
    if detail is None:
        return JSONResponse(status_code=404, content=service.not_found(article_id).model_dump(by_alias=True))
    return detail.model_dump(by_alias=True)
