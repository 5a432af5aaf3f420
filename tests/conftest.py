from datetime import date

import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_today
from app.core.config import Settings
from app.main import create_app

TODAY = date(2024, 5, 15)


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        SECRET_KEY="test-secret",
        BCRYPT_ROUNDS=4,
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def app(settings):
    app = create_app(settings)
    app.dependency_overrides[get_today] = lambda: TODAY
    return app


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client


def login_headers(client, email, password="s3cret-pass"):
    res = client.post("/api/v1/register", json={"email": email, "password": password})
    assert res.status_code == 201, res.text
    res = client.post("/api/v1/login", json={"email": email, "password": password})
    assert res.status_code == 200, res.text
    return {"Authorization": f"Bearer {res.json()['token']}"}


@pytest.fixture
def alice(client):
    return login_headers(client, "alice@example.com")


@pytest.fixture
def bob(client):
    return login_headers(client, "bob@example.com")
