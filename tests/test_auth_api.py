from fastapi.testclient import TestClient

from router_status.main import app


def test_auth_token_success(monkeypatch):
    def _ok_client(client: str, password: str) -> bool:
        return client == "terraform" and password == "secret"

    monkeypatch.setattr("router_status.services.auth.authenticate_client", _ok_client)
    client = TestClient(app)

    response = client.post(
        "/auth/token",
        data={"username": "terraform", "password": "secret"},
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )

    assert response.status_code == 200
    payload = response.json()
    assert payload["token_type"] == "bearer"
    assert "access_token" in payload
    assert payload["expires_in"] > 0


def test_auth_token_invalid(monkeypatch):
    def _deny_client(client: str, password: str) -> bool:
        return False

    monkeypatch.setattr("router_status.services.auth.authenticate_client", _deny_client)
    client = TestClient(app)

    response = client.post(
        "/auth/token",
        data={"username": "terraform", "password": "bad"},
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )

    assert response.status_code == 401
    assert response.json()["detail"] == "Incorrect client name or password"


def test_token_grants_access_to_schema(monkeypatch):
    monkeypatch.setattr(
        "router_status.services.auth.authenticate_client", lambda client, password: True
    )
    client = TestClient(app)

    token = client.post(
        "/auth/token",
        data={"username": "terraform", "password": "secret"},
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    ).json()["access_token"]

    response = client.get(
        "/data-sources/router-status/schema",
        headers={"Authorization": f"Bearer {token}"},
    )
    assert response.status_code == 200


def test_schema_requires_token():
    client = TestClient(app)
    response = client.get("/data-sources/router-status/schema")
    assert response.status_code == 401


def test_schema_rejects_tampered_token():
    client = TestClient(app)
    response = client.get(
        "/data-sources/router-status/schema",
        headers={"Authorization": "Bearer not-a-jwt"},
    )
    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid or expired token"


def test_authenticate_client_against_settings(monkeypatch):
    from router_status.config import settings
    from router_status.services.auth import authenticate_client

    monkeypatch.setattr(settings, "engine_clients", "terraform:s3cret, ci:other")
    assert authenticate_client("terraform", "s3cret")
    assert authenticate_client("ci", "other")
    assert not authenticate_client("terraform", "other")
    assert not authenticate_client("unknown", "s3cret")
