"""Registration, login and the JWT guard on resource endpoints."""


def test_register_returns_token(client):
    response = client.post(
        "/api/auth/register",
        json={"name": "Sam", "email": "sam@example.com", "password": "password123"},
    )
    assert response.status_code == 201
    assert response.get_json()["access_token"]


def test_register_duplicate_email_conflicts(client, auth_headers):
    response = client.post(
        "/api/auth/register",
        json={"name": "Jane", "email": "jane@example.com", "password": "password123"},
    )
    assert response.status_code == 409


def test_register_validates_every_field(client):
    response = client.post("/api/auth/register", json={"email": "not-an-email", "password": "short"})
    assert response.status_code == 400
    fields = {d["field"] for d in response.get_json()["details"]}
    assert fields == {"email", "password"}


def test_login_with_valid_credentials(client, auth_headers):
    response = client.post("/api/auth/login", json={"email": "jane@example.com", "password": "password123"})
    assert response.status_code == 200
    assert response.get_json()["access_token"]


def test_login_with_wrong_password(client, auth_headers):
    response = client.post("/api/auth/login", json={"email": "jane@example.com", "password": "wrong-password"})
    assert response.status_code == 401
    assert response.get_json()["error"] == "Invalid email or password"


def test_resource_endpoints_require_token(client):
    response = client.get("/api/profile/me")
    assert response.status_code == 401
    assert response.get_json()["error"].startswith("Authentication required")
    assert client.get("/api/generated-cv").status_code == 401
