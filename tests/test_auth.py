"""Registration, login and the bearer-token gate."""

from datetime import datetime, timedelta, timezone

from jose import jwt

from socialnet.core.security import create_access_token
from socialnet.modules.user_management.models.user import User


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["version"] == "0.1.0"


class TestRegister:
    def test_register_creates_user(self, client, session_factory):
        response = client.post("/register", json={"name": "A", "email": "a@x.com", "password": "secret"})
        assert response.status_code == 201
        body = response.json()
        assert body["name"] == "A"
        assert body["email"] == "a@x.com"
        assert body["isAdmin"] is False
        assert "password" not in body
        assert "hashedPassword" not in body

        db = session_factory()
        try:
            stored = db.query(User).filter(User.id == body["id"]).one()
            assert stored.hashed_password != "secret"
        finally:
            db.close()

    def test_email_is_normalized(self, client):
        response = client.post("/register", json={"name": "A", "email": "Mixed@Example.com", "password": "secret"})
        assert response.status_code == 201
        assert response.json()["email"] == "mixed@example.com"

    def test_duplicate_email(self, client, alice):
        response = client.post("/register", json={"name": "Other", "email": "ALICE@example.com", "password": "pw"})
        assert response.status_code == 409
        assert response.json() == {"detail": "Email already registered"}

    def test_invalid_body(self, client):
        response = client.post("/register", json={"name": "A", "email": "not-an-email", "password": "secret"})
        assert response.status_code == 422

        response = client.post("/register", json={"email": "a@x.com", "password": "secret"})
        assert response.status_code == 422


class TestLogin:
    def test_login_returns_token_and_profile(self, client, alice):
        response = client.post("/login", json={"email": "alice@example.com", "password": "secret"})
        assert response.status_code == 200
        body = response.json()
        assert body["token"]
        assert body["tokenType"] == "bearer"
        assert body["user"] == {
            "id": alice.id,
            "name": "Alice",
            "email": "alice@example.com",
            "isAdmin": False,
            "profileImageUrl": None,
        }

    def test_failures_look_the_same(self, client, alice):
        wrong_password = client.post("/login", json={"email": "alice@example.com", "password": "nope"})
        unknown_email = client.post("/login", json={"email": "nobody@example.com", "password": "secret"})

        assert wrong_password.status_code == unknown_email.status_code == 401
        assert wrong_password.json() == unknown_email.json() == {"detail": "Invalid email or password"}

    def test_malformed_email_fails_like_an_unknown_one(self, client, alice):
        response = client.post("/login", json={"email": "nobody", "password": "secret"})
        assert response.status_code == 401
        assert response.json() == {"detail": "Invalid email or password"}

    def test_email_is_matched_case_insensitively(self, client, alice):
        response = client.post("/login", json={"email": "Alice@Example.COM", "password": "secret"})
        assert response.status_code == 200
        assert response.json()["user"]["id"] == alice.id


class TestAuthorizationGate:
    def test_missing_header(self, client):
        response = client.get("/posts")
        assert response.status_code == 401
        assert response.json() == {"detail": "Not authenticated"}
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_wrong_scheme(self, client, alice):
        response = client.get("/posts", headers={"Authorization": f"Basic {alice.token}"})
        assert response.status_code == 401

    def test_bad_token(self, client):
        response = client.get("/posts", headers={"Authorization": "Bearer garbage"})
        assert response.status_code == 401
        assert response.json() == {"detail": "Could not validate credentials"}

    def test_expired_token(self, client, settings, alice):
        token = create_access_token(alice.id, False, settings, expires_delta=timedelta(seconds=-5))
        response = client.get("/posts", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_token_without_subject(self, client, settings):
        expire = datetime.now(timezone.utc) + timedelta(minutes=5)
        token = jwt.encode({"exp": expire, "admin": True}, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
        response = client.get("/users", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401
        assert response.json() == {"detail": "Could not validate credentials"}

    def test_valid_token(self, client, alice):
        response = client.get("/posts", headers=alice.headers)
        assert response.status_code == 200
        assert response.json() == []


class TestAdminGate:
    def test_non_admin_is_forbidden(self, client, alice):
        response = client.get("/users", headers=alice.headers)
        assert response.status_code == 403
        assert response.json() == {"detail": "Admin privileges required"}

    def test_admin_lists_users(self, client, alice, admin):
        response = client.get("/users", headers=admin.headers)
        assert response.status_code == 200
        emails = {user["email"] for user in response.json()}
        assert emails == {"alice@example.com", "admin@example.com"}

    def test_admin_flag_is_taken_from_the_token(self, client, settings, alice):
        # Alice is not an admin in the store, but the signed token says otherwise
        token = create_access_token(alice.id, True, settings)
        response = client.get("/users", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 200

    def test_admin_without_token(self, client):
        assert client.get("/users").status_code == 401
