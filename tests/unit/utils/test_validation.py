"""Tests for validation utilities (missing fields, phone, email, form)."""
import pytest

from src.utils.validation import (
    find_missing_fields,
    is_missing,
    validate_email,
    validate_phone_number,
    validate_registration_form,
)


@pytest.fixture
def complete_payload():
    return {
        "submittedAt": "2026-02-01T00:00:00Z",
        "name": "A",
        "rollNumber": "42",
        "class": "CSE",
        "phoneNumber": "999",
        "email": "a@b.com",
    }


@pytest.fixture
def form_values():
    return {
        "name": "Asha Verma",
        "rollNumber": "2410001001",
        "class": "CSE",
        "phoneNumber": "+91 98765 43210",
        "email": "asha@college.edu",
    }


class TestIsMissing:
    """Tests for is_missing function."""

    @pytest.mark.parametrize("value", [None, ""])
    def test_missing_values(self, value):
        assert is_missing(value) is True

    @pytest.mark.parametrize("value", ["x", " ", "0", 0, False])
    def test_present_values(self, value):
        """Only None and the empty string count as missing."""
        assert is_missing(value) is False


class TestFindMissingFields:
    """Tests for find_missing_fields function."""

    def test_complete_payload(self, complete_payload):
        """Complete payload should have no missing fields."""
        assert find_missing_fields(complete_payload) == []

    def test_empty_string_is_missing(self, complete_payload):
        complete_payload["rollNumber"] = ""
        assert find_missing_fields(complete_payload) == ["rollNumber"]

    def test_none_is_missing(self, complete_payload):
        complete_payload["email"] = None
        assert find_missing_fields(complete_payload) == ["email"]

    def test_absent_key_is_missing(self, complete_payload):
        del complete_payload["class"]
        assert find_missing_fields(complete_payload) == ["class"]

    def test_reports_every_missing_field_in_declared_order(self, complete_payload):
        """All missing fields should be listed, not just the first."""
        del complete_payload["email"]
        complete_payload["submittedAt"] = None
        complete_payload["phoneNumber"] = ""

        assert find_missing_fields(complete_payload) == [
            "submittedAt", "phoneNumber", "email"
        ]

    def test_empty_payload(self):
        assert find_missing_fields({}) == [
            "submittedAt", "name", "rollNumber", "class", "phoneNumber", "email"
        ]


class TestValidatePhoneNumber:
    """Tests for validate_phone_number function."""

    @pytest.mark.parametrize("phone", ["9876543210", "+91 98765 43210", "022-2345-6789"])
    def test_valid_phone(self, phone):
        assert validate_phone_number(phone) == (True, "")

    def test_empty_phone(self):
        assert validate_phone_number("") == (False, "Phone number is required")

    def test_too_short_phone(self):
        assert validate_phone_number("98765") == (False, "Enter a valid phone number")

    def test_letters_after_valid_prefix_rejected(self):
        """The whole value must match, not just its start."""
        assert validate_phone_number("9876543210 ext") == (False, "Enter a valid phone number")

    def test_letters_rejected(self):
        assert validate_phone_number("98765abc43210") == (False, "Enter a valid phone number")


class TestValidateEmail:
    """Tests for validate_email function."""

    @pytest.mark.parametrize("email", ["a@b.com", "first.last+tag@college.edu.in"])
    def test_valid_email(self, email):
        assert validate_email(email) == (True, "")

    def test_empty_email(self):
        assert validate_email("") == (False, "Email is required")

    @pytest.mark.parametrize("email", [
        "plainaddress", "a@b", "a@@b.com", "a b@c.com", "a@b.com\n", "a@b.com trailing"
    ])
    def test_invalid_email(self, email):
        assert validate_email(email) == (False, "Enter a valid email address")


class TestValidateRegistrationForm:
    """Tests for validate_registration_form function."""

    def test_valid_form(self, form_values):
        assert validate_registration_form(form_values) == {}

    def test_required_messages(self):
        """Every empty field should get its own required message."""
        errors = validate_registration_form({})

        assert errors == {
            "name": "Name is required",
            "rollNumber": "Roll number is required",
            "class": "Class is required",
            "phoneNumber": "Phone number is required",
            "email": "Email is required",
        }

    def test_format_errors(self, form_values):
        form_values["phoneNumber"] = "123"
        form_values["email"] = "not-an-email"

        errors = validate_registration_form(form_values)

        assert errors == {
            "phoneNumber": "Enter a valid phone number",
            "email": "Enter a valid email address",
        }
