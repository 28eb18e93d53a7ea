from __future__ import annotations

from fastapi import APIRouter, Depends

from help_articles.api.deps import get_repository
from help_articles.api.public import error_detail
from help_articles.core.security import require_admin
from help_articles.domain import Success
from help_articles.services.repository import ArticleRepository, RefreshOutcome

router = APIRouter(prefix="/v1/admin", tags=["admin"], dependencies=[Depends(require_admin)])

@router.post("/refresh")
async def admin_refresh(repository: ArticleRepository = Depends(get_repository)):
    result = await repository.refresh_collection()
    outcome = RefreshOutcome.from_result(result)
    if isinstance(result, Success):
        return {"outcome": outcome.value, "count": len(result.data)}
    return {"outcome": outcome.value, "count": 0, "error": error_detail(result.error)}

@router.delete("/cache")
async def admin_clear_cache(repository: ArticleRepository = Depends(get_repository)):
    await repository.clear_cache()
    return {"ok": True}
