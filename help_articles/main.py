from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from help_articles.core.config import settings
from help_articles.core.db import SessionLocal, engine, init_schema
from help_articles.core.logger import setup_logging
from help_articles.core.scheduler import RefreshJob, scheduler, start_scheduler, shutdown_scheduler
from help_articles.api.public import router as public_router
from help_articles.api.admin import router as admin_router
from help_articles.api.mock import router as mock_router
from help_articles.services.api_client import ArticleApiClient
from help_articles.services.cache import ArticleCache
from help_articles.services.mock_backend import MockApiService
from help_articles.services.repository import ArticleRepository

app = FastAPI(title="Help Articles API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(public_router)
app.include_router(admin_router)
if settings.mock_backend_enabled:
    app.include_router(mock_router)

@app.on_event("startup")
async def on_startup():
    setup_logging(settings.log_level)
    await init_schema(engine)

    cache = ArticleCache(SessionLocal)
    api_client = ArticleApiClient(settings.api_base_url, settings.request_timeout_seconds, settings.user_agent)
    repository = ArticleRepository(api_client, cache)
    app.state.repository = repository
    app.state.mock_service = MockApiService()

    start_scheduler(
        RefreshJob(
            repository,
            scheduler,
            backoff_minutes=settings.retry_backoff_minutes,
            max_backoff_minutes=settings.retry_backoff_max_minutes,
        )
    )

@app.on_event("shutdown")
async def on_shutdown():
    shutdown_scheduler()
    await engine.dispose()

@app.get("/health")
async def health():
    return {"ok": True}
