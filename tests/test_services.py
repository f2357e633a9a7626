"""Tests for social service programs and their beneficiaries."""
from app.models.service import Service

from conftest import history_actions, make_resident


def create_service(client, headers, **overrides):
    payload = {"service_name": "Feeding Program", "service_date": "2024-05-01", "location": "Covered Court"}
    payload.update(overrides)
    response = client.post("/api/services", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_create_service(client, auth_headers):
    service = create_service(client, auth_headers)
    assert service["beneficiary_count"] == 0
    assert "Juan Dela Cruz created a new service: Feeding Program" in history_actions(client, auth_headers)


def test_create_service_requires_name(client, auth_headers):
    response = client.post("/api/services", json={"location": "Hall"}, headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["message"] == "service_name is required."


def test_beneficiaries(client, auth_headers):
    service = create_service(client, auth_headers)
    resident = make_resident(client, auth_headers)

    added = client.post(
        f"/api/services/{service['id']}/beneficiaries",
        json={"resident_id": resident["id"], "notes": "2 kg rice"},
        headers=auth_headers,
    )
    assert added.status_code == 201
    assert added.json()["first_name"] == "Maria"

    beneficiaries = client.get(f"/api/services/{service['id']}/beneficiaries").json()
    assert [b["notes"] for b in beneficiaries] == ["2 kg rice"]
    assert client.get(f"/api/services/{service['id']}").json()["beneficiary_count"] == 1


def test_add_beneficiary_requires_resident(client, auth_headers):
    service = create_service(client, auth_headers)
    response = client.post(f"/api/services/{service['id']}/beneficiaries", json={}, headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["message"] == "resident_id is required for beneficiary."


def test_remove_beneficiary_of_other_service(client, auth_headers):
    first = create_service(client, auth_headers)
    second = create_service(client, auth_headers, service_name="Medical Mission")
    resident = make_resident(client, auth_headers)
    beneficiary = client.post(
        f"/api/services/{first['id']}/beneficiaries",
        json={"resident_id": resident["id"]},
        headers=auth_headers,
    ).json()

    response = client.delete(
        f"/api/services/{second['id']}/beneficiaries/{beneficiary['id']}",
        headers=auth_headers,
    )
    assert response.status_code == 404


def test_delete_service_with_beneficiaries_rejected(client, auth_headers, db_session):
    service = create_service(client, auth_headers)
    resident = make_resident(client, auth_headers)
    client.post(
        f"/api/services/{service['id']}/beneficiaries",
        json={"resident_id": resident["id"]},
        headers=auth_headers,
    )

    response = client.delete(f"/api/services/{service['id']}", headers=auth_headers)

    assert response.status_code == 400
    assert response.json()["message"] == "Cannot delete service. It has beneficiaries. Please remove them first."
    assert db_session.query(Service).count() == 1


def test_delete_service_after_removing_beneficiaries(client, auth_headers, db_session):
    service = create_service(client, auth_headers)
    resident = make_resident(client, auth_headers)
    beneficiary = client.post(
        f"/api/services/{service['id']}/beneficiaries",
        json={"resident_id": resident["id"]},
        headers=auth_headers,
    ).json()

    removed = client.delete(f"/api/services/{service['id']}/beneficiaries/{beneficiary['id']}", headers=auth_headers)
    assert removed.status_code == 200

    response = client.delete(f"/api/services/{service['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert db_session.query(Service).count() == 0


def test_list_services_newest_first(client, auth_headers):
    create_service(client, auth_headers, service_name="Old", service_date="2023-01-01")
    create_service(client, auth_headers, service_name="New", service_date="2024-01-01")

    names = [s["service_name"] for s in client.get("/api/services").json()]
    assert names == ["New", "Old"]
