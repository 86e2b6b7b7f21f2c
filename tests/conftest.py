import pytest

from budgetsplit import create_app
from budgetsplit.config import TestConfig
from budgetsplit.extensions import db


@pytest.fixture()
def app():
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


def _register(client, email, name="Test User", password="s3cret-pass"):
    resp = client.post(
        "/api/v1/auth/register",
        json={"name": name, "email": email, "password": password},
    )
    assert resp.status_code == 201, resp.get_json()
    return resp.get_json()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def user_client(app):
    """A logged-in client; ``client.user`` holds the registered user."""
    c = app.test_client()
    c.user = _register(c, "alice@example.com", name="Alice")
    return c


@pytest.fixture()
def other_client(app):
    c = app.test_client()
    c.user = _register(c, "bob@example.com", name="Bob")
    return c


@pytest.fixture()
def make_category(user_client):
    def _make(client=None, **overrides):
        payload = {"name": "Rent", "type": "expense", "allocationBucket": "needs", "icon": "R"}
        payload.update(overrides)
        resp = (client or user_client).post("/api/v1/categories", json=payload)
        assert resp.status_code == 201, resp.get_json()
        return resp.get_json()
    return _make


@pytest.fixture()
def make_transaction(user_client):
    def _make(client=None, **overrides):
        payload = {"amount": 10, "type": "expense", "date": "2024-03-01"}
        payload.update(overrides)
        resp = (client or user_client).post("/api/v1/transactions", json=payload)
        assert resp.status_code == 201, resp.get_json()
        return resp.get_json()
    return _make
