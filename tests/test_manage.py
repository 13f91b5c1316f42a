"""The admin-flag management command."""

from socialnet.manage import set_admin_flag


def test_grant_takes_effect_on_next_login(client, session_factory, alice):
    # The old token still carries the old flag
    assert client.get("/users", headers=alice.headers).status_code == 403

    assert set_admin_flag(session_factory, "Alice@Example.com", True)

    login = client.post("/login", json={"email": alice.email, "password": "secret"}).json()
    assert login["user"]["isAdmin"] is True
    headers = {"Authorization": f"Bearer {login['token']}"}
    assert client.get("/users", headers=headers).status_code == 200
    assert client.get("/users", headers=alice.headers).status_code == 403


def test_revoke(client, session_factory, admin):
    assert set_admin_flag(session_factory, admin.email, False)
    login = client.post("/login", json={"email": admin.email, "password": "secret"}).json()
    assert login["user"]["isAdmin"] is False


def test_unknown_email(session_factory):
    assert set_admin_flag(session_factory, "nobody@example.com", True) is False
