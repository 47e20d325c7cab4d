"""Application-level behaviour: health probes, headers and error envelopes."""

from fastapi.testclient import TestClient

from src.contact_api.api.http.app import app
from src.contact_api.api.http.deps import get_contact_service


class TestHealth:
    def test_liveness(self, client: TestClient):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_readiness_checks_database(self, client: TestClient):
        response = client.get("/health/ready")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ready"
        assert body["checks"]["database"] == {"status": "healthy", "type": "sqlite"}


class TestResponseHeaders:
    def test_request_id_is_echoed(self, client: TestClient):
        response = client.get("/health", headers={"X-Request-ID": "req-123"})

        assert response.headers["X-Request-ID"] == "req-123"

    def test_request_id_generated(self, client: TestClient):
        assert client.get("/health").headers["X-Request-ID"]

    def test_security_headers(self, client: TestClient):
        response = client.get("/health")

        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"


class TestErrorEnvelope:
    def test_unknown_route(self, client: TestClient):
        response = client.get("/api/unknown")

        assert response.status_code == 404
        assert response.json() == {"errors": "Not Found"}

    def test_unexpected_error_is_500(self, client: TestClient, test_user, auth_headers):
        class ExplodingService:
            def search(self, user, params):
                raise RuntimeError("boom")

        app.dependency_overrides[get_contact_service] = lambda: ExplodingService()

        response = client.get("/api/contacts", headers=auth_headers)

        assert response.status_code == 500
        assert response.json() == {"errors": "Internal Server Error"}
