from __future__ import annotations

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.orm import DeclarativeBase
from help_articles.core.config import settings

CREATE_TABLES_SQL = [
    '''
    CREATE TABLE IF NOT EXISTS articles (
        id TEXT PRIMARY KEY NOT NULL,
        title TEXT NOT NULL,
        summary TEXT NOT NULL,
        content TEXT NOT NULL,
        last_updated_timestamp INTEGER NOT NULL,
        cached_at_timestamp INTEGER NOT NULL
    );
    ''',
    'CREATE INDEX IF NOT EXISTS ix_articles_last_updated ON articles(last_updated_timestamp);',
    '''
    CREATE TABLE IF NOT EXISTS cache_metadata (
        key TEXT PRIMARY KEY NOT NULL,
        last_fetch_timestamp INTEGER NOT NULL,
        is_stale BOOLEAN NOT NULL DEFAULT 0
    );
    ''',
]

def sqlite_url(path: str) -> str:
    # sqlite is file-based; ":memory:" is not shared across connections, use a file in tests
    return f"sqlite+aiosqlite:///{path}"

def make_engine(path: str) -> AsyncEngine:
    return create_async_engine(sqlite_url(path), echo=False)

def make_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)

async def init_schema(engine: AsyncEngine) -> None:
    # Create tables (simple, no migration tool needed)
    async with engine.begin() as conn:
        for stmt in CREATE_TABLES_SQL:
            await conn.execute(text(stmt))

engine = make_engine(settings.db_path)

SessionLocal = make_sessionmaker(engine)

class Base(DeclarativeBase):
    pass
