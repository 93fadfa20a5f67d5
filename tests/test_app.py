# =============================================================================
# tests/test_app.py - Health Route and App-Level Behaviour
# =============================================================================

import pytest

from app import create_app
from models import db


def test_health(client):
    resp = client.get("/")

    assert resp.status_code == 200
    assert resp.get_json() == {"ok": True, "service": "ip-app-api"}


def test_health_alias(client):
    assert client.get("/health").get_json()["ok"] is True


def test_security_headers(client):
    resp = client.get("/")

    assert resp.headers["X-Content-Type-Options"] == "nosniff"
    assert resp.headers["X-Frame-Options"] == "DENY"


def test_unknown_route_returns_json_404(client):
    resp = client.get("/api/nope")

    assert resp.status_code == 404
    assert "error" in resp.get_json()


def test_wrong_method_returns_json_405(client):
    resp = client.get("/api/home/history")

    assert resp.status_code == 405
    assert "error" in resp.get_json()


def test_cors_allows_any_origin_by_default(client):
    resp = client.get("/", headers={"Origin": "http://localhost:3000"})

    assert resp.headers["Access-Control-Allow-Origin"] in ("http://localhost:3000", "*")


@pytest.fixture
def restricted_app():
    app = create_app(
        TESTING=True,
        SQLALCHEMY_DATABASE_URI="sqlite://",
        SQLALCHEMY_ENGINE_OPTIONS={},
        BCRYPT_ROUNDS=4,
        CORS_ORIGIN="http://a.test, http://b.test",
    )
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


def test_cors_allows_listed_origins(restricted_app):
    client = restricted_app.test_client()

    for origin in ("http://a.test", "http://b.test"):
        resp = client.get("/", headers={"Origin": origin})
        assert resp.headers["Access-Control-Allow-Origin"] == origin


def test_cors_rejects_unlisted_origin(restricted_app):
    resp = restricted_app.test_client().get("/", headers={"Origin": "http://c.test"})

    assert "Access-Control-Allow-Origin" not in resp.headers


class TestNonObjectBodies:
    """JSON bodies that are not objects are treated as missing input."""

    @pytest.mark.parametrize("body", [[1, 2], "8.8.8.8", 42, None])
    @pytest.mark.parametrize(
        "method, path, error",
        [
            ("post", "/api/login", "Email and password required"),
            ("post", "/api/home/search", "IP address is required"),
            ("post", "/api/home/lookup", "IP address is required"),
            ("delete", "/api/home/history", "At least one history item must be selected"),
        ],
    )
    def test_returns_400(self, client, mock_ipinfo, method, path, error, body):
        resp = getattr(client, method)(path, json=body)

        assert resp.status_code == 400
        assert resp.get_json() == {"error": error}
        mock_ipinfo.assert_not_called()
