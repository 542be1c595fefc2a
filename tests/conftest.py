import httpx
import pytest
from httpx import ASGITransport

API_URL = "http://api.test"


@pytest.fixture
def mock_env(monkeypatch, tmp_path):
    monkeypatch.setenv("API_URL", API_URL)
    monkeypatch.setenv("API_TOKEN", "test-token")
    monkeypatch.setenv("GOOGLE_MAPS_API_KEY", "test-maps-key")
    monkeypatch.setenv("LANGUAGE_STORE_PATH", str(tmp_path / "language.json"))


@pytest.fixture
async def client(mock_env):
    from chargehub.main import app, lifespan

    async with lifespan(app):
        async with httpx.AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as c:
            yield c
