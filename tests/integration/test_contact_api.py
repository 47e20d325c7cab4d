"""End-to-end tests for the contact endpoints."""

from fastapi.testclient import TestClient
from sqlmodel import Session, select

from src.contact_api.entities.service.address import AddressTable
from src.contact_api.entities.service.contact import ContactTable

CONTACT = {
    "first_name": "Ilham",
    "last_name": "Rh",
    "email": "ilham@example.com",
    "phone": "06886945",
}


class TestCreateContact:
    """POST /api/contacts"""

    def test_create(self, client: TestClient, test_user, auth_headers):
        response = client.post("/api/contacts", json=CONTACT, headers=auth_headers)

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["id"]
        assert {key: data[key] for key in CONTACT} == CONTACT

    def test_reject_invalid(self, client: TestClient, session: Session, test_user, auth_headers):
        response = client.post(
            "/api/contacts",
            json={
                "first_name": "",
                "last_name": "",
                "email": "ilham",
                "phone": "06886945068869450688694506886945",
            },
            headers=auth_headers,
        )

        assert response.status_code == 400
        errors = response.json()["errors"]
        assert errors
        assert {error["field"] for error in errors} == {"first_name", "email", "phone"}
        assert session.exec(select(ContactTable)).all() == []

    def test_reject_display_name_email(
        self, client: TestClient, session: Session, test_user, auth_headers
    ):
        response = client.post(
            "/api/contacts",
            json={**CONTACT, "email": "Bob Smith <bob@example.com>"},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert [error["field"] for error in response.json()["errors"]] == ["email"]
        assert session.exec(select(ContactTable)).all() == []

    def test_reject_malformed_json(self, client: TestClient, test_user, auth_headers):
        response = client.post(
            "/api/contacts",
            content=b"{not json",
            headers={**auth_headers, "Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["errors"]

    def test_reject_without_token(self, client: TestClient, test_user):
        response = client.post("/api/contacts", json=CONTACT)

        assert response.status_code == 401
        assert response.json() == {"errors": "Unauthorized"}

    def test_reject_wrong_token(self, client: TestClient, session: Session, test_user):
        response = client.post("/api/contacts", json=CONTACT, headers={"X-API-TOKEN": "wrong"})

        assert response.status_code == 401
        assert response.json()["errors"]
        assert session.exec(select(ContactTable)).all() == []


class TestGetContact:
    """GET /api/contacts/{id}"""

    def test_round_trip(self, client: TestClient, test_user, auth_headers):
        created = client.post("/api/contacts", json=CONTACT, headers=auth_headers).json()["data"]

        response = client.get(f"/api/contacts/{created['id']}", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["data"] == created

    def test_round_trip_keeps_email_spelling(self, client: TestClient, test_user, auth_headers):
        payload = {**CONTACT, "email": "Ilham@EXAMPLE.COM"}
        created = client.post("/api/contacts", json=payload, headers=auth_headers).json()["data"]

        response = client.get(f"/api/contacts/{created['id']}", headers=auth_headers)

        assert response.status_code == 200
        assert {key: response.json()["data"][key] for key in payload} == payload

    def test_not_found(self, client: TestClient, test_user, auth_headers):
        response = client.get("/api/contacts/missing", headers=auth_headers)

        assert response.status_code == 404
        assert response.json() == {"errors": "Contact is not found"}

    def test_foreign_contact_looks_missing(
        self, client: TestClient, test_user, other_user, contact_factory, other_auth_headers
    ):
        contact = contact_factory(test_user)

        response = client.get(f"/api/contacts/{contact.id}", headers=other_auth_headers)

        assert response.status_code == 404
        assert response.json() == {"errors": "Contact is not found"}


class TestUpdateContact:
    """PUT /api/contacts/{id}"""

    def test_update(self, client: TestClient, test_user, contact_factory, auth_headers):
        contact = contact_factory(test_user)
        payload = {"first_name": "Budi", "last_name": "Santoso", "email": "budi@example.com", "phone": "0822"}

        response = client.put(f"/api/contacts/{contact.id}", json=payload, headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["data"] == {"id": contact.id, **payload}

    def test_reject_invalid(self, client: TestClient, test_user, contact_factory, auth_headers):
        contact = contact_factory(test_user)

        response = client.put(
            f"/api/contacts/{contact.id}", json={"first_name": ""}, headers=auth_headers
        )

        assert response.status_code == 400
        assert response.json()["errors"]

    def test_foreign_contact(
        self, client: TestClient, session: Session, test_user, other_user, contact_factory, other_auth_headers
    ):
        contact = contact_factory(test_user)

        response = client.put(
            f"/api/contacts/{contact.id}", json={"first_name": "Hacked"}, headers=other_auth_headers
        )

        assert response.status_code == 404
        session.expire_all()
        assert session.get(ContactTable, contact.id).first_name == contact.first_name


class TestDeleteContact:
    """DELETE /api/contacts/{id}"""

    def test_delete_cascades(
        self, client: TestClient, session: Session, test_user, contact_factory, address_factory, auth_headers
    ):
        contact = contact_factory(test_user)
        address_factory(contact)

        response = client.delete(f"/api/contacts/{contact.id}", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {"data": "OK"}
        assert client.get(f"/api/contacts/{contact.id}", headers=auth_headers).status_code == 404
        assert session.exec(select(AddressTable)).all() == []

    def test_foreign_contact(
        self, client: TestClient, test_user, other_user, contact_factory, auth_headers, other_auth_headers
    ):
        contact = contact_factory(test_user)

        response = client.delete(f"/api/contacts/{contact.id}", headers=other_auth_headers)

        assert response.status_code == 404
        assert client.get(f"/api/contacts/{contact.id}", headers=auth_headers).status_code == 200


class TestSearchContacts:
    """GET /api/contacts"""

    def test_no_filters_returns_callers_contacts(
        self, client: TestClient, test_user, other_user, contact_factory, auth_headers
    ):
        contact = contact_factory(test_user)
        contact_factory(other_user, first_name="Theirs")

        response = client.get("/api/contacts", headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert [item["id"] for item in body["data"]] == [contact.id]
        assert body["paging"] == {"current_page": 1, "total_page": 1, "size": 10}

    def test_no_matches(self, client: TestClient, test_user, contact_factory, auth_headers):
        contact_factory(test_user)

        response = client.get("/api/contacts", params={"name": "nobody"}, headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {
            "data": [],
            "paging": {"current_page": 1, "total_page": 0, "size": 10},
        }

    def test_second_page_of_single_contact(self, client: TestClient, test_user, contact_factory, auth_headers):
        contact_factory(test_user)

        response = client.get("/api/contacts", params={"page": 2, "size": 1}, headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {
            "data": [],
            "paging": {"current_page": 2, "total_page": 1, "size": 1},
        }

    def test_filters(self, client: TestClient, test_user, contact_factory, auth_headers):
        contact_factory(test_user, first_name="Ilham", last_name="Rh", email="ilham@mail.com", phone="0811")
        contact_factory(test_user, first_name="Budi", last_name="Santoso", email="budi@mail.com", phone="0822")

        by_name = client.get("/api/contacts", params={"name": "SANTO"}, headers=auth_headers)
        by_email = client.get("/api/contacts", params={"email": "ilham"}, headers=auth_headers)
        by_phone = client.get("/api/contacts", params={"phone": "082"}, headers=auth_headers)

        assert [c["first_name"] for c in by_name.json()["data"]] == ["Budi"]
        assert [c["first_name"] for c in by_email.json()["data"]] == ["Ilham"]
        assert [c["first_name"] for c in by_phone.json()["data"]] == ["Budi"]

    def test_invalid_paging(self, client: TestClient, test_user, auth_headers):
        response = client.get("/api/contacts", params={"page": 0, "size": "x"}, headers=auth_headers)

        assert response.status_code == 400
        assert {error["field"] for error in response.json()["errors"]} == {"page", "size"}

    def test_requires_token(self, client: TestClient):
        response = client.get("/api/contacts")

        assert response.status_code == 401
