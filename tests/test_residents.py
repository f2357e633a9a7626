"""Tests for resident endpoints."""
from datetime import date

from app.models.resident import Resident
from app.utils.date_utils import calculate_age

from conftest import history_actions, make_resident


def test_create_resident_derives_age(client, auth_headers):
    resident = make_resident(client, auth_headers, birthdate="1990-06-15", age=3)

    assert resident["age"] == calculate_age(date(1990, 6, 15))
    assert resident["resident_status"] == "Resident"
    assert resident["is_senior_citizen"] is False


def test_create_resident_trims_text(client, auth_headers):
    resident = make_resident(client, auth_headers, first_name="  Maria  ", address="  Purok 1 ")
    assert resident["first_name"] == "Maria"
    assert resident["address"] == "Purok 1"


def test_create_resident_invalid_sex(client, auth_headers):
    response = client.post(
        "/api/residents",
        json={"first_name": "Pedro", "last_name": "Reyes", "sex": "Unknown"},
        headers=auth_headers,
    )
    assert response.status_code == 400
    message = response.json()["message"]
    for choice in ("Male", "Female", "Other"):
        assert choice in message


def test_create_resident_missing_required(client, auth_headers):
    response = client.post("/api/residents", json={"first_name": "Pedro"}, headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["message"] == "last_name, first_name, and sex are required."


def test_create_resident_name_too_long(client, auth_headers):
    response = client.post(
        "/api/residents",
        json={"first_name": "Pedro", "last_name": "R" * 101, "sex": "Male"},
        headers=auth_headers,
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Last name must be 100 characters or less."


def test_create_resident_blank_birthdate(client, auth_headers):
    resident = make_resident(client, auth_headers, birthdate="")
    assert resident["birthdate"] is None
    assert resident["age"] is None


def test_get_repairs_stale_age(client, auth_headers, db_session):
    created = make_resident(client, auth_headers, birthdate="1980-01-01")

    db_session.query(Resident).filter(Resident.id == created["id"]).update({"age": 1})
    db_session.commit()

    response = client.get(f"/api/residents/{created['id']}")
    assert response.status_code == 200
    assert response.json()["age"] == calculate_age(date(1980, 1, 1))

    db_session.expire_all()
    stored = db_session.get(Resident, created["id"])
    assert stored.age == calculate_age(date(1980, 1, 1))


def test_list_residents_ordered_and_repaired(client, auth_headers, db_session):
    make_resident(client, auth_headers, first_name="Ana", last_name="Zamora")
    stale = make_resident(client, auth_headers, first_name="Ben", last_name="Abad", birthdate="2000-02-29")
    db_session.query(Resident).filter(Resident.id == stale["id"]).update({"age": 99})
    db_session.commit()

    response = client.get("/api/residents")

    assert response.status_code == 200
    residents = response.json()
    assert [r["last_name"] for r in residents] == ["Abad", "Zamora"]
    assert residents[0]["age"] == calculate_age(date(2000, 2, 29))


def test_get_unknown_resident(client):
    response = client.get("/api/residents/999")
    assert response.status_code == 404
    assert response.json()["message"] == "Resident not found."


def test_update_resident(client, auth_headers):
    created = make_resident(client, auth_headers)
    response = client.put(
        f"/api/residents/{created['id']}",
        json={"first_name": "Maria", "last_name": "Santos", "sex": "Female", "middle_name": "Lopez", "is_pwd": True},
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert response.json()["middle_name"] == "Lopez"
    assert response.json()["is_pwd"] is True
    assert "Juan Dela Cruz updated resident information: Maria L. Santos" in history_actions(client, auth_headers)


def test_update_unknown_resident(client, auth_headers):
    response = client.put(
        "/api/residents/999",
        json={"first_name": "Maria", "last_name": "Santos", "sex": "Female"},
        headers=auth_headers,
    )
    assert response.status_code == 404


def test_create_is_audited(client, auth_headers):
    make_resident(client, auth_headers, middle_name="Dizon")
    assert "Juan Dela Cruz created a new resident: Maria D. Santos" in history_actions(client, auth_headers)


def test_resident_certificates(client, auth_headers):
    resident = make_resident(client, auth_headers)
    client.post(
        "/api/certificates",
        json={"resident_id": resident["id"], "certificate_type": "Certificate of Residency", "issue_date": "2024-01-10"},
        headers=auth_headers,
    )

    response = client.get(f"/api/residents/{resident['id']}/certificates")
    assert response.status_code == 200
    assert [c["certificate_type"] for c in response.json()] == ["Certificate of Residency"]

    assert client.get("/api/residents/999/certificates").status_code == 404
