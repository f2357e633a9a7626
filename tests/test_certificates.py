"""Tests for the certificate issuance log."""
from conftest import history_actions, make_resident


def test_create_certificate(client, auth_headers):
    resident = make_resident(client, auth_headers, middle_name="Dizon")

    response = client.post(
        "/api/certificates",
        json={
            "resident_id": resident["id"],
            "certificate_type": "Barangay Clearance",
            "purpose": "Employment",
            "issue_date": "2024-02-01",
            "or_number": "OR-1001",
            "amount": "50.00",
        },
        headers=auth_headers,
    )

    assert response.status_code == 201
    body = response.json()
    assert body["certificate_type"] == "Barangay Clearance"
    assert float(body["amount"]) == 50.0
    assert "Juan Dela Cruz released a Barangay Clearance for Maria D. Santos" in history_actions(client, auth_headers)


def test_create_certificate_required_fields(client, auth_headers):
    response = client.post("/api/certificates", json={"certificate_type": "Barangay Clearance"}, headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["message"] == "resident_id, certificate_type, and issue_date are required."


def test_create_certificate_unknown_resident(client, auth_headers):
    response = client.post(
        "/api/certificates",
        json={"resident_id": 999, "certificate_type": "Barangay Clearance", "issue_date": "2024-02-01"},
        headers=auth_headers,
    )
    assert response.status_code == 404


def test_list_certificates_with_names(client, auth_headers):
    resident = make_resident(client, auth_headers)
    for issue_date, kind in (("2024-01-01", "Certificate of Residency"), ("2024-03-01", "Certificate of Indigency")):
        client.post(
            "/api/certificates",
            json={"resident_id": resident["id"], "certificate_type": kind, "issue_date": issue_date},
            headers=auth_headers,
        )

    certificates = client.get("/api/certificates").json()

    assert [c["certificate_type"] for c in certificates] == ["Certificate of Indigency", "Certificate of Residency"]
    assert certificates[0]["first_name"] == "Maria"
    assert certificates[0]["last_name"] == "Santos"
