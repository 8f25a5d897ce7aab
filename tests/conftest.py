import pytest
from fastapi.testclient import TestClient

from contact_form.config import Settings, EmailSettings, CorsSettings
from contact_form.main.main import create_app

ALLOWED_ORIGIN = "http://localhost:3000"
MALICIOUS_ORIGIN = "https://malicious-site.com"


class FakeEmailer:
    """stands in for the SendGrid emailer, records every submission it is asked to send"""

    def __init__(self, error: Exception | None = None):
        self.sent = []
        self.error = error

    async def send_contact_submission(self, submission, **kwargs):
        self.sent.append(submission)
        if self.error is not None:
            raise self.error


def make_settings(api_key: str | None = "SG.test-key") -> Settings:
    return Settings(
        ENVIRONMENT="test",
        EMAIL_SETTINGS=EmailSettings(SENDGRID_API_KEY=api_key,
                                     EMAIL_FROM="noreply@example.com",
                                     CONTACT_EMAIL="contact@example.com"),
        CORS_SETTINGS=CorsSettings(ALLOWED_ORIGINS=f"{ALLOWED_ORIGIN}, https://www.example.com"))


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def emailer():
    return FakeEmailer()


@pytest.fixture
def client(settings, emailer):
    return TestClient(create_app(settings=settings, emailer=emailer))


@pytest.fixture
def valid_payload():
    return {
        "name": "Jane Smith",
        "email": "jane@example.com",
        "message": "Quick question about your services."
    }
