from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.dependencies.rate_limits import setup_rate_limiter
from api.routes import system
from infrastructure.services import get_settings


def make_client():
    app = FastAPI()
    setup_rate_limiter(app)
    app.include_router(system.router)
    return app, TestClient(app)


def test_health():
    _, client = make_client()
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_version_uses_settings():
    app, client = make_client()
    settings = get_settings().model_copy(update={"GIT_SHA": "abc123"})
    app.dependency_overrides[get_settings] = lambda: settings

    response = client.get("/version")

    assert response.status_code == 200
    assert response.json() == {"version": "abc123"}


def test_rate_limit_exceeded_returns_429():
    _, client = make_client()
    system.limiter.reset()
    for _ in range(50):
        client.get("/health")
    response = client.get("/health")
    system.limiter.reset()

    assert response.status_code == 429
    assert response.json()["message"] == "Rate limit exceeded"
    assert "50 per 1 minute" in response.json()["limit"]


def test_forwarded_client_is_rate_limit_key():
    _, client = make_client()
    system.limiter.reset()
    for _ in range(50):
        client.get("/health", headers={"X-Forwarded-For": "203.0.113.7, 10.0.0.1"})

    other = client.get("/health", headers={"X-Forwarded-For": "198.51.100.2"})
    blocked = client.get("/health", headers={"X-Forwarded-For": "203.0.113.7"})
    system.limiter.reset()

    assert other.status_code == 200
    assert blocked.status_code == 429
