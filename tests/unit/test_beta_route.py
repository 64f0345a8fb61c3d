import pytest
from fastapi.testclient import TestClient

from beta_signup.email_service import EmailDeliveryError
from beta_signup.main import app
from beta_signup.registration import RegistrationHandler
from beta_signup.routes.beta import get_registration_handler


class RecordingSender:
    def __init__(self, error=None):
        self.error = error
        self.calls = []

    def send(self, from_address, to, subject, html_content):
        self.calls.append((from_address, to, subject))
        if self.error:
            raise self.error
        return "email-123"


@pytest.fixture
def sender():
    return RecordingSender()


@pytest.fixture
def client(sender):
    app.dependency_overrides[get_registration_handler] = lambda: RegistrationHandler(
        sender, from_address="GoalHero Team <info@goalhero.eu>"
    )
    yield TestClient(app)
    app.dependency_overrides.clear()


def assert_cors_headers(response):
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.headers["access-control-allow-methods"] == "POST, OPTIONS"
    assert response.headers["access-control-allow-headers"] == "Content-Type"


def test_register_sends_welcome_email(client, sender):
    response = client.post("/api/beta-register", json={"email": "a@b.com"})

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Welcome email sent successfully!"}
    assert response.headers["content-type"] == "application/json"
    assert_cors_headers(response)
    assert sender.calls == [
        ("GoalHero Team <info@goalhero.eu>", "a@b.com", "🎉⚽ Welcome to GoalHero!")
    ]


def test_preflight_returns_ok_without_body(client, sender):
    response = client.options("/api/beta-register")

    assert response.status_code == 200
    assert response.content == b""
    assert_cors_headers(response)
    assert sender.calls == []


@pytest.mark.parametrize("method", ["GET", "PUT", "PATCH", "DELETE"])
def test_other_methods_get_405_json(client, sender, method):
    response = client.request(method, "/api/beta-register")

    assert response.status_code == 405
    assert response.json() == {"success": False, "message": "Method not allowed"}
    assert_cors_headers(response)


def test_invalid_json_is_bad_request(client, sender):
    response = client.post(
        "/api/beta-register",
        content=b"{oops",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Invalid request body"}
    assert sender.calls == []


def test_null_body_is_treated_as_missing_email(client, sender):
    response = client.post(
        "/api/beta-register",
        content=b"null",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Email is required"}
    assert sender.calls == []


def test_missing_email_is_bad_request(client, sender):
    response = client.post("/api/beta-register", json={"language": "es"})

    assert response.status_code == 400
    assert response.json()["message"] == "Email is required"
    assert sender.calls == []


def test_unsupported_language_is_bad_request(client, sender):
    response = client.post("/api/beta-register", json={"email": "a@b.com", "language": "de"})

    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Language must be 'en' or 'es'"}
    assert sender.calls == []


def test_delivery_failure_is_server_error(sender):
    sender.error = EmailDeliveryError("Resend error: status code 503")
    app.dependency_overrides[get_registration_handler] = lambda: RegistrationHandler(sender)
    try:
        response = TestClient(app).post("/api/beta-register", json={"email": "a@b.com"})
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {"success": False, "message": "Failed to send welcome email"}
    assert len(sender.calls) == 1


def test_health():
    response = TestClient(app).get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}
