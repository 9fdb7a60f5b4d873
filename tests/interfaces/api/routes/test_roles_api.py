"""Integration tests for the role endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

ROLES_URL = "/api/v1/roles"


def test_role_crud_flow(client: TestClient, auth_headers: dict[str, str]) -> None:
    created = client.post(ROLES_URL, json={"name": "Developer"}, headers=auth_headers)
    assert created.status_code == 201
    body = created.json()
    assert body["success"] is True
    assert body["data"] == {"id": 1, "name": "Developer"}

    duplicate = client.post(ROLES_URL, json={"name": "Developer"}, headers=auth_headers)
    assert duplicate.status_code == 409
    assert duplicate.json()["success"] is False

    listed = client.get(ROLES_URL, headers=auth_headers)
    assert listed.status_code == 200
    assert [role["name"] for role in listed.json()["data"]] == ["Developer"]

    updated = client.put(
        f"{ROLES_URL}/1", json={"name": "Senior Developer"}, headers=auth_headers
    )
    assert updated.status_code == 200
    assert updated.json()["data"]["name"] == "Senior Developer"

    detail = client.get(f"{ROLES_URL}/1", headers=auth_headers)
    assert detail.status_code == 200
    assert detail.json()["data"]["name"] == "Senior Developer"

    deleted = client.delete(f"{ROLES_URL}/1", headers=auth_headers)
    assert deleted.status_code == 204
    assert deleted.content == b""

    missing = client.get(f"{ROLES_URL}/1", headers=auth_headers)
    assert missing.status_code == 404
    assert missing.json()["message"] == "Role not found"


def test_role_name_validation_errors(client: TestClient, auth_headers: dict[str, str]) -> None:
    for payload in ({"name": "ab"}, {"name": "x" * 65}, {"name": 123}, {}):
        response = client.post(ROLES_URL, json=payload, headers=auth_headers)
        assert response.status_code == 400, payload
        assert response.json()["success"] is False


def test_role_invalid_ids(client: TestClient, auth_headers: dict[str, str]) -> None:
    assert client.get(f"{ROLES_URL}/0", headers=auth_headers).status_code == 400
    assert client.get(f"{ROLES_URL}/abc", headers=auth_headers).status_code == 400
    assert client.delete(f"{ROLES_URL}/999", headers=auth_headers).status_code == 404
    missing_update = client.put(
        f"{ROLES_URL}/999", json={"name": "Nobody"}, headers=auth_headers
    )
    assert missing_update.status_code == 404


def test_role_in_use_cannot_be_deleted(
    client: TestClient, auth_headers: dict[str, str], make_employee, make_role
) -> None:
    role_id = make_role("Analyst")
    make_employee(role_id=role_id)

    response = client.delete(f"{ROLES_URL}/{role_id}", headers=auth_headers)

    assert response.status_code == 409
    assert client.get(f"{ROLES_URL}/{role_id}", headers=auth_headers).status_code == 200
