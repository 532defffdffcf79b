"""Tests for the forward-auth credential check service."""

import pytest
from fastapi.testclient import TestClient

from auth import CredentialStore, create_auth_app


@pytest.fixture
def auth_client(config, logger):
    return TestClient(create_auth_app(config, logger))


def test_allow(auth_client):
    response = auth_client.post("/auth", json={"username": "b", "password": "p2"})

    assert response.status_code == 200
    assert response.json() == {"result": "allow", "is_superuser": False}


def test_deny_wrong_password(auth_client):
    response = auth_client.post("/auth", json={"username": "b", "password": "wrong"})

    assert response.status_code == 401
    assert response.json() == {"result": "deny", "is_superuser": False}


def test_deny_crossed_pairs(auth_client):
    """Passwords only match the username at the same position."""
    response = auth_client.post("/auth", json={"username": "a", "password": "p2"})

    assert response.status_code == 401


def test_deny_missing_fields(auth_client):
    response = auth_client.post("/auth", json={})

    assert response.status_code == 401
    assert response.json()["result"] == "deny"


@pytest.mark.parametrize(
    "body",
    [b"null", b'{"username": null}', b'{"username": "b", "password": null}'],
)
def test_null_credentials_denied(auth_client, body):
    response = auth_client.post("/auth", content=body, headers={"Content-Type": "application/json"})

    assert response.status_code == 401
    assert response.json() == {"result": "deny", "is_superuser": False}


def test_malformed_json(auth_client):
    response = auth_client.post(
        "/auth", content=b'{"username": ', headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 400
    assert response.headers["content-type"].startswith("text/plain")
    assert "Invalid JSON" in response.text


def test_health(auth_client):
    assert auth_client.get("/health").status_code == 200


def test_store_first_match():
    store = CredentialStore([("a", "p1"), ("a", "p2")])

    assert store.check("a", "p1")
    assert store.check("a", "p2")
    assert not store.check("a", "p3")


def test_empty_store_denies_everything():
    store = CredentialStore([])

    assert not store.check("", "")
