import os

# Settings are read at import time
os.environ.setdefault("ADMIN_TOKEN", "test-admin-token")
os.environ.setdefault("MOCK_BACKEND_ENABLED", "true")

import pytest

from help_articles.core.db import init_schema, make_engine, make_sessionmaker
from help_articles.services.cache import ArticleCache
from helpers import FakeClock


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
async def engine(tmp_path):
    eng = make_engine(str(tmp_path / "cache.db"))
    await init_schema(eng)
    yield eng
    await eng.dispose()


@pytest.fixture
def sessionmaker(engine):
    return make_sessionmaker(engine)


@pytest.fixture
def cache(sessionmaker, clock):
    return ArticleCache(sessionmaker, clock=clock)
