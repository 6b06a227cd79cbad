"""Unit tests for the SendGrid email helper utilities."""

from __future__ import annotations

import pytest

from discipleship import config
from discipleship.infrastructure import email


class _Response:
    def __init__(self, status_code: int, body: str = "") -> None:
        self.status_code = status_code
        self.body = body


class _RecordingClient:
    sent: list = []
    response = _Response(202)

    def __init__(self, api_key: str) -> None:
        self.api_key = api_key

    def send(self, message):
        type(self).sent.append(message)
        return type(self).response


@pytest.fixture()
def sendgrid_enabled(monkeypatch):
    monkeypatch.setenv("SENDGRID_API_KEY", "SG.test")
    monkeypatch.setenv("SENDGRID_SENDER", "hello@example.com")
    monkeypatch.setenv("APP_BASE_URL", "https://app.example.com/")
    config.reset_settings_cache()
    _RecordingClient.sent = []
    _RecordingClient.response = _Response(202)
    monkeypatch.setattr(email, "SendGridAPIClient", _RecordingClient)
    yield
    monkeypatch.delenv("SENDGRID_API_KEY")
    monkeypatch.delenv("SENDGRID_SENDER")
    monkeypatch.delenv("APP_BASE_URL")
    config.reset_settings_cache()


def test_send_email_skips_without_configuration(monkeypatch):
    monkeypatch.setattr(email, "SendGridAPIClient", _RecordingClient)
    _RecordingClient.sent = []
    assert email.send_email("Subject", "<p>Hi</p>", "user@example.com") is False
    assert _RecordingClient.sent == []


def test_send_notification_email_links_back_to_the_app(sendgrid_enabled):
    assert email.send_notification_email(
        "user@example.com",
        title="New message from <Sam>",
        body="Hello & welcome",
        target_url="/dashboard/messages/3",
    )
    (message,) = _RecordingClient.sent
    html = message.get()["content"][0]["value"]
    assert "https://app.example.com/dashboard/messages/3" in html
    assert "&lt;Sam&gt;" in html
    assert "Hello &amp; welcome" in html


def test_unsuccessful_response_is_reported_as_failure(sendgrid_enabled, caplog):
    _RecordingClient.response = _Response(
        400, '{"errors": [{"message": "Invalid sender"}]}'
    )
    with caplog.at_level("ERROR"):
        assert email.send_email("Subject", "<p>Hi</p>", "user@example.com") is False
    assert "Invalid sender" in caplog.text


def test_error_details_extraction():
    assert email._extract_sendgrid_error_details(None) is None
    assert email._extract_sendgrid_error_details(b"plain text") == "plain text"
    assert (
        email._extract_sendgrid_error_details(
            {"errors": [{"message": "first"}, {"message": "second"}]}
        )
        == "first; second"
    )
