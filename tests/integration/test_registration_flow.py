"""Integration tests for the form-to-store registration flow."""
import httpx
import pytest

from src.api.app_factory import create_app
from src.services.registration_client import submit_registration
from src.services.storage_service import InMemoryDocumentStore
from src.utils.config import Settings
from src.utils.validation import validate_registration_form

BASE_URL = "http://registration.test"


@pytest.fixture
def store():
    return InMemoryDocumentStore()


@pytest.fixture
def transport(store):
    """Route the page's HTTP calls straight into the Flask app."""
    app = create_app(Settings(store_backend="memory"), store=store)
    return httpx.WSGITransport(app=app)


@pytest.fixture
def form_values():
    return {
        "name": "Asha Verma",
        "rollNumber": "2410001001",
        "class": "CSE • 3rd Year",
        "phoneNumber": "+91 98765 43210",
        "email": "asha@college.edu",
    }


class TestRegistrationFlow:
    """Form values travel through the API into the store."""

    def test_valid_form_is_stored(self, transport, store, form_values):
        # Step 1: 表單檢查
        assert validate_registration_form(form_values) == {}

        # Step 2: 送出
        success, message = submit_registration(form_values, BASE_URL, transport=transport)

        # Step 3: 驗證結果
        assert success is True
        assert message == "Registration submitted successfully"

        documents = store.collection("guest-speaker-registrations").documents()
        assert len(documents) == 1
        stored = documents[0]
        for field, value in form_values.items():
            assert stored[field] == value
        assert stored["submittedAt"]
        assert stored["createdAt"]

    def test_server_rejection_reaches_the_user(self, transport, store, form_values):
        """Fields skipped by the form still get the server's message."""
        form_values["class"] = ""

        success, message = submit_registration(form_values, BASE_URL, transport=transport)

        assert success is False
        assert message == "Missing required fields: class"
        assert store.collection("guest-speaker-registrations").documents() == []
