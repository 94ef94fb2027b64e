from tests.conftest import API, PASSWORD, login, register


def test_register_creates_member_without_exposing_hash(client, db):
    user = register(client, "Dana@Example.com", "Dana")
    assert user["email"] == "dana@example.com"
    assert user["role"] == "member"
    assert "password_hash" not in user
    stored = db.rows("users")[0]
    assert stored["password_hash"].startswith("$argon2")


def test_register_duplicate_email_conflicts(client):
    register(client, "dana@example.com", "Dana")
    response = client.post(f"{API}/auth/register", json={"email": "DANA@example.com", "password": "x", "name": "Dup"})
    assert response.status_code == 409
    assert response.json() == {"success": False, "message": "User with this email already exists", "code": "ALREADY_EXISTS"}


def test_register_rejects_malformed_email(client):
    response = client.post(f"{API}/auth/register", json={"email": "not-an-email", "password": "x", "name": "X"})
    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"
    assert response.json()["success"] is False


def test_login_returns_token_and_user(client):
    register(client, "dana@example.com", "Dana")
    response = client.post(f"{API}/auth/login", json={"email": "dana@example.com", "password": PASSWORD})
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["data"]["token"]
    assert body["data"]["user"]["email"] == "dana@example.com"


def test_login_wrong_password_is_unauthorized(client):
    register(client, "dana@example.com", "Dana")
    response = client.post(f"{API}/auth/login", json={"email": "dana@example.com", "password": "nope"})
    assert response.status_code == 401
    assert response.json()["code"] == "UNAUTHORIZED"


def test_login_unknown_user_is_unauthorized(client):
    response = client.post(f"{API}/auth/login", json={"email": "ghost@example.com", "password": "nope"})
    assert response.status_code == 401


def test_me_requires_token(client):
    response = client.get(f"{API}/auth/me")
    assert response.status_code == 401
    assert response.json()["code"] == "UNAUTHORIZED"


def test_me_rejects_bad_token(client):
    response = client.get(f"{API}/auth/me", headers={"Authorization": "Bearer garbage"})
    assert response.status_code == 401


def test_me_returns_current_user(client):
    register(client, "dana@example.com", "Dana")
    session = login(client, "dana@example.com")
    response = client.get(f"{API}/auth/me", headers=session["headers"])
    assert response.status_code == 200
    assert response.json()["data"]["id"] == session["id"]


def test_only_admin_changes_roles(client, users):
    response = client.put(
        f"{API}/users/{users['bob']['id']}/role",
        json={"role": "manager"},
        headers=users["alice"]["headers"],
    )
    assert response.status_code == 403
    assert response.json()["message"] == "Only admins can change user roles"

    response = client.put(
        f"{API}/users/{users['bob']['id']}/role",
        json={"role": "manager"},
        headers=users["admin"]["headers"],
    )
    assert response.status_code == 200
    assert response.json()["data"]["role"] == "manager"


def test_unknown_route_uses_error_envelope(client):
    response = client.get(f"{API}/does-not-exist")
    assert response.status_code == 404
    assert response.json()["success"] is False
    assert response.json()["code"] == "NOT_FOUND"
