# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Every test gets a fresh app bound to an in-memory SQLite database, with the
# seed user already inserted. The ipinfo.io client is patched at the
# `requests.get` seam so no test touches the network.
# =============================================================================

import os

# Keep the module-level Config away from any real database.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.pop("POSTGRES_URL", None)

from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock, patch

import pytest

from app import create_app
from models import db
from models.ip_history import IpHistory


SEED_EMAIL = "test@test.com"
SEED_PASSWORD = "1234"

SAMPLE_GEO = {
    "ip": "8.8.8.8",
    "city": "Mountain View",
    "region": "California",
    "country": "US",
    "loc": "37.4056,-122.0775",
    "org": "AS15169 Google LLC",
    "postal": "94043",
    "timezone": "America/Los_Angeles",
}


@pytest.fixture
def app():
    app = create_app(
        TESTING=True,
        SQLALCHEMY_DATABASE_URI="sqlite://",
        SQLALCHEMY_ENGINE_OPTIONS={},
        BCRYPT_ROUNDS=4,
        SEED_USER_EMAIL=SEED_EMAIL,
        SEED_USER_PASSWORD=SEED_PASSWORD,
        IPINFO_TOKEN=None,
        IPINFO_BASE_URL="https://ipinfo.io",
        REJECT_PRIVATE_IPS=False,
        CORS_ORIGIN=None,
    )
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def _provider_response(payload=None):
    response = MagicMock()
    response.status_code = 200
    response.json.return_value = payload if payload is not None else dict(SAMPLE_GEO)
    return response


@pytest.fixture
def provider_response():
    """Factory for fake ipinfo.io responses."""
    return _provider_response


@pytest.fixture
def mock_ipinfo():
    """Patch requests.get inside the ipinfo client; yields the mock."""
    with patch("services.ipinfo.requests.get") as mock_get:
        mock_get.return_value = _provider_response()
        yield mock_get


@pytest.fixture
def seed_history(app):
    """Insert three history rows with known, spaced-out timestamps.

    Returns their ids oldest-first.
    """
    base = datetime(2020, 1, 1, 12, 0, tzinfo=timezone.utc)
    ids = []
    with app.app_context():
        for offset, ip in enumerate(["1.1.1.1", "9.9.9.9", "8.8.4.4"]):
            entry = IpHistory(ip_address=ip, created_at=base + timedelta(minutes=offset))
            db.session.add(entry)
            db.session.flush()
            ids.append(entry.id)
        db.session.commit()
    return ids


@pytest.fixture
def history_ips(app):
    """Returns a callable reading the stored history IPs newest-first."""
    def _read():
        with app.app_context():
            return [entry.ip_address for entry in IpHistory.newest_first()]
    return _read
