from fastapi.testclient import TestClient

from server import server


app = server.handler


def test_api_router_loaded():
    paths = {route.path for route in app.routes}
    assert {"/health", "/version", "/locale/{target}", "/{lang}"} <= paths


def test_middleware_stack():
    middleware_classes = [m.cls.__name__ for m in app.user_middleware]
    assert "CORSMiddleware" in middleware_classes
    assert "LocaleRouteMiddleware" in middleware_classes


def test_rate_limiter_installed():
    assert app.state.limiter is not None


def test_lifespan_loads_translations():
    with TestClient(app) as client:
        assert client.app.state.translation_service is not None
        response = client.get("/health")
    assert response.status_code == 200


def test_unknown_path_never_404s_without_locale():
    client = TestClient(app, follow_redirects=False)
    response = client.get("/some/unmapped/path", headers={"Accept-Language": "en"})
    assert response.status_code == 307
    assert response.headers["location"] == "/en/some/unmapped/path"
