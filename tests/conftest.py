from dataclasses import dataclass
from typing import Callable, Dict

import pytest
from fastapi.testclient import TestClient

from socialnet.core.config import Settings
from socialnet.main import create_app
from socialnet.manage import set_admin_flag

PASSWORD = "secret"


@dataclass
class Account:
    id: str
    name: str
    email: str
    token: str

    @property
    def headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}


@pytest.fixture
def settings() -> Settings:
    return Settings(
        DATABASE_URL="sqlite://",
        SECRET_KEY="test-secret-key",
        ENVIRONMENT="test",
        DEBUG=False,
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    """TestClient inside its context so the lifespan creates the tables"""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def session_factory(app, client):
    return app.state.session_factory


@pytest.fixture
def make_account(client, session_factory) -> Callable[..., Account]:
    """Register and log in a user, optionally granting admin before login."""

    def _make(name: str, email: str, admin: bool = False) -> Account:
        response = client.post("/register", json={"name": name, "email": email, "password": PASSWORD})
        assert response.status_code == 201, response.text
        user_id = response.json()["id"]

        if admin:
            assert set_admin_flag(session_factory, email, True)

        response = client.post("/login", json={"email": email, "password": PASSWORD})
        assert response.status_code == 200, response.text
        return Account(id=user_id, name=name, email=email, token=response.json()["token"])

    return _make


@pytest.fixture
def alice(make_account) -> Account:
    return make_account("Alice", "alice@example.com")


@pytest.fixture
def bob(make_account) -> Account:
    return make_account("Bob", "bob@example.com")


@pytest.fixture
def admin(make_account) -> Account:
    return make_account("Admin", "admin@example.com", admin=True)


@pytest.fixture
def create_post(client):
    def _create(account: Account, title: str = "T", **fields) -> dict:
        response = client.post("/posts", json={"title": title, **fields}, headers=account.headers)
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def add_comment(client):
    def _add(account: Account, post_id: str, text: str) -> dict:
        response = client.post(f"/posts/{post_id}/comments", json={"text": text}, headers=account.headers)
        assert response.status_code == 201, response.text
        return response.json()

    return _add
