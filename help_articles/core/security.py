import secrets

from fastapi import Header, HTTPException, status
from help_articles.core.config import settings

def require_admin(x_admin_token: str | None = Header(default=None, alias="X-Admin-Token")) -> None:
    # Refresh and cache-clear endpoints are admin-only
    if x_admin_token is None or not secrets.compare_digest(x_admin_token.encode(), settings.admin_token.encode()):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid admin token")
