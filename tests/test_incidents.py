"""Tests for incident endpoints."""
from conftest import history_actions, make_resident


def incident_payload(**overrides):
    payload = {
        "incident_date": "2024-03-05",
        "incident_type": "Noise Complaint",
        "location": "Purok 2",
        "description": "Karaoke past midnight",
    }
    payload.update(overrides)
    return payload


def test_create_incident_defaults_status(client, auth_headers):
    response = client.post("/api/incidents", json=incident_payload(complainant_name="Aling Nena"), headers=auth_headers)

    assert response.status_code == 201
    assert response.json()["status"] == "Open"
    assert "Juan Dela Cruz recorded a new Noise Complaint incident involving Aling Nena" in history_actions(client, auth_headers)


def test_create_incident_requires_date_and_type(client, auth_headers):
    response = client.post("/api/incidents", json={"location": "Purok 2"}, headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["message"] == "incident_date and incident_type are required."


def test_create_incident_unknown_complainant(client, auth_headers):
    response = client.post("/api/incidents", json=incident_payload(complainant_id=999), headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["message"] == "Complainant resident not found."


def test_list_joins_party_names(client, auth_headers):
    complainant = make_resident(client, auth_headers, first_name="Nena", last_name="Cruz")
    respondent = make_resident(client, auth_headers, first_name="Boy", last_name="Tapang", sex="Male")
    client.post(
        "/api/incidents",
        json=incident_payload(complainant_id=complainant["id"], respondent_id=respondent["id"]),
        headers=auth_headers,
    )
    client.post("/api/incidents", json=incident_payload(incident_date="2024-04-01", incident_type="Theft"), headers=auth_headers)

    incidents = client.get("/api/incidents").json()

    assert [i["incident_type"] for i in incidents] == ["Theft", "Noise Complaint"]
    assert incidents[1]["complainant_first_name"] == "Nena"
    assert incidents[1]["respondent_last_name"] == "Tapang"
    assert incidents[0]["complainant_first_name"] is None


def test_update_incident(client, auth_headers):
    created = client.post("/api/incidents", json=incident_payload(), headers=auth_headers).json()

    response = client.put(
        f"/api/incidents/{created['id']}",
        json=incident_payload(status="Settled"),
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert response.json()["status"] == "Settled"
    assert f"Juan Dela Cruz updated incident #{created['id']} - Status: Settled" in history_actions(client, auth_headers)


def test_update_and_delete_unknown_incident(client, auth_headers):
    assert client.put("/api/incidents/999", json=incident_payload(), headers=auth_headers).status_code == 404
    assert client.delete("/api/incidents/999", headers=auth_headers).status_code == 404


def test_delete_incident(client, auth_headers):
    created = client.post("/api/incidents", json=incident_payload(), headers=auth_headers).json()

    response = client.delete(f"/api/incidents/{created['id']}", headers=auth_headers)

    assert response.status_code == 200
    assert client.get(f"/api/incidents/{created['id']}").status_code == 404
