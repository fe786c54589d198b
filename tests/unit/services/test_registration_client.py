"""Unit tests for registration_client."""
import json
from datetime import datetime, timezone

import httpx
import pytest

from src.services.registration_client import (
    FALLBACK_ERROR_MESSAGE,
    REGISTRATION_PATH,
    build_payload,
    submit_registration,
)

BASE_URL = "http://registration.test"


@pytest.fixture
def form_values():
    return {
        "name": "Asha Verma",
        "rollNumber": "2410001001",
        "class": "CSE",
        "phoneNumber": "+91 98765 43210",
        "email": "asha@college.edu",
    }


def _transport(status_code, body=None, captured=None, content=None):
    def handler(request: httpx.Request) -> httpx.Response:
        if captured is not None:
            captured.append(request)
        if content is not None:
            return httpx.Response(status_code, content=content)
        return httpx.Response(status_code, json=body)

    return httpx.MockTransport(handler)


class TestBuildPayload:
    """Test build_payload function."""

    def test_adds_submitted_at(self, form_values):
        moment = datetime(2026, 2, 1, 8, 15, tzinfo=timezone.utc)

        payload = build_payload(form_values, now=moment)

        assert payload == {"submittedAt": "2026-02-01T08:15:00.000Z", **form_values}

    def test_missing_values_become_empty_strings(self):
        payload = build_payload({"name": "A"})

        assert payload["rollNumber"] == ""
        assert payload["submittedAt"]


class TestSubmitRegistration:
    """Test submit_registration function."""

    def test_success_posts_json(self, form_values):
        captured = []
        transport = _transport(
            200,
            {"success": True, "message": "Registration submitted successfully"},
            captured,
        )

        success, message = submit_registration(form_values, BASE_URL, transport=transport)

        assert success is True
        assert message == "Registration submitted successfully"
        request = captured[0]
        assert request.method == "POST"
        assert request.url.path == REGISTRATION_PATH
        body = json.loads(request.content)
        assert body["email"] == "asha@college.edu"
        assert "submittedAt" in body

    def test_server_message_is_surfaced(self, form_values):
        transport = _transport(400, {"message": "Missing required fields: rollNumber"})

        success, message = submit_registration(form_values, BASE_URL, transport=transport)

        assert success is False
        assert message == "Missing required fields: rollNumber"

    def test_fallback_when_no_message(self, form_values):
        transport = _transport(500, {})

        assert submit_registration(form_values, BASE_URL, transport=transport) == (
            False, FALLBACK_ERROR_MESSAGE
        )

    def test_fallback_when_body_is_not_json(self, form_values):
        transport = _transport(502, content=b"<html>Bad Gateway</html>")

        assert submit_registration(form_values, BASE_URL, transport=transport) == (
            False, FALLBACK_ERROR_MESSAGE
        )

    def test_transport_error_returns_fallback(self, form_values):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        success, message = submit_registration(
            form_values, BASE_URL, transport=httpx.MockTransport(handler)
        )

        assert success is False
        assert message == FALLBACK_ERROR_MESSAGE
