# tests/conftest.py
import os
import sys

import pytest

# чтобы import create_app работал при запуске из корня
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from app import create_app  # noqa: E402

TEST_CONFIG = {
    "TESTING": True,
    "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
}


@pytest.fixture()
def app_factory():
    """Build a test app, optionally around an injected equipment store."""

    def _factory(store=None):
        return create_app(TEST_CONFIG, store=store)

    return _factory


@pytest.fixture()
def app(app_factory):
    return app_factory()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def make_equipment(client):
    """POST a record and return the identifier storage assigned to it."""

    def _make(name="Press-01", **fields):
        resp = client.post("/api/equipments", json={"name": name, **fields})
        assert resp.status_code == 201
        return client.get("/api/equipments").get_json()[0]["identifier"]

    return _make
