import pytest
from fastapi.testclient import TestClient

from help_articles.api.deps import get_mock_service, get_repository
from help_articles.domain import BackendError, Failure, NetworkError, Success, Timeout
from help_articles.main import app
from help_articles.services.mock_backend import MockApiService
from helpers import make_article

ADMIN_HEADERS = {"X-Admin-Token": "test-admin-token"}


class StubRepository:
    def __init__(self):
        self.collection_result = Success([make_article("1")])
        self.item_result = Success(make_article("1"))
        self.stale = False
        self.force_flags = []
        self.cleared = False

    async def get_collection(self, force_refresh=False):
        self.force_flags.append(force_refresh)
        return self.collection_result

    async def get_item(self, article_id, force_refresh=False):
        self.force_flags.append(force_refresh)
        return self.item_result

    async def refresh_collection(self):
        return await self.get_collection(force_refresh=True)

    async def is_stale(self):
        return self.stale

    async def clear_cache(self):
        self.cleared = True


@pytest.fixture
def repo():
    return StubRepository()


@pytest.fixture
def client(repo):
    app.dependency_overrides[get_repository] = lambda: repo
    app.dependency_overrides[get_mock_service] = lambda: MockApiService()
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    assert client.get("/health").json() == {"ok": True}


def test_list_articles(client, repo):
    repo.stale = True

    resp = client.get("/v1/articles", params={"force_refresh": "true"})

    assert resp.status_code == 200
    data = resp.json()
    assert data["stale"] is True
    assert data["items"][0]["id"] == "1"
    assert "lastUpdatedTimestamp" in data["items"][0]
    assert repo.force_flags == [True]


def test_list_articles_error_surfaces_message(client, repo):
    repo.collection_result = Failure(NetworkError())

    resp = client.get("/v1/articles")

    assert resp.status_code == 502
    detail = resp.json()["detail"]
    assert detail["kind"] == "network_error"
    assert "internet connection" in detail["message"]


def test_timeout_maps_to_504(client, repo):
    repo.collection_result = Failure(Timeout())

    assert client.get("/v1/articles").status_code == 504


def test_get_article_not_found(client, repo):
    repo.item_result = Failure(BackendError("NOT_FOUND", "Not Found", "Article with ID 9 not found"))

    resp = client.get("/v1/articles/9")

    assert resp.status_code == 404
    assert resp.json()["detail"]["title"] == "Not Found"
    assert resp.json()["detail"]["code"] == "NOT_FOUND"


def test_get_article(client, repo):
    resp = client.get("/v1/articles/1")

    assert resp.status_code == 200
    assert resp.json()["title"] == "Title 1"
    assert repo.force_flags == [False]


def test_admin_requires_token(client):
    assert client.post("/v1/admin/refresh").status_code == 401


def test_admin_refresh_reports_outcome(client, repo):
    resp = client.post("/v1/admin/refresh", headers=ADMIN_HEADERS)
    assert resp.json() == {"outcome": "succeed", "count": 1}

    repo.collection_result = Failure(NetworkError())
    resp = client.post("/v1/admin/refresh", headers=ADMIN_HEADERS)
    assert resp.json()["outcome"] == "retry"
    assert resp.json()["error"]["kind"] == "network_error"


def test_admin_clear_cache(client, repo):
    resp = client.delete("/v1/admin/cache", headers=ADMIN_HEADERS)

    assert resp.json() == {"ok": True}
    assert repo.cleared is True


def test_mock_backend_serves_articles(client):
    resp = client.get("/mock/articles")

    assert resp.status_code == 200
    assert len(resp.json()["articles"]) == 5


def test_mock_backend_unknown_id_is_structured_404(client):
    resp = client.get("/mock/articles/404")

    assert resp.status_code == 404
    assert resp.json()["errorCode"] == "NOT_FOUND"
