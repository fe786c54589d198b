"""Data validation utilities."""
import re
from typing import Any, Dict, List, Mapping, Sequence, Tuple

from src.models.registration import REQUIRED_FIELDS

PHONE_PATTERN = re.compile(r"[0-9+\-\s]{10,}")
EMAIL_PATTERN = re.compile(
    r"[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+@[a-zA-Z0-9-]+(?:\.[a-zA-Z0-9-]+)+"
)

# Form fields typed by the user, with the message shown when left empty.
FORM_FIELDS = {
    "name": "Name is required",
    "rollNumber": "Roll number is required",
    "class": "Class is required",
    "phoneNumber": "Phone number is required",
    "email": "Email is required",
}


def is_missing(value: Any) -> bool:
    """Absent, None and the empty string count as missing. Whitespace does not."""
    return value is None or value == ""


def find_missing_fields(
    payload: Mapping[str, Any],
    fields: Sequence[str] = REQUIRED_FIELDS
) -> List[str]:
    """
    Collect every required field that is absent, null or empty.

    Args:
        payload: Untyped inbound mapping
        fields: Required field names, in the order they should be reported

    Returns:
        Missing field names in declared order (empty list when complete)
    """
    return [field for field in fields if is_missing(payload.get(field))]


def validate_phone_number(phone: str) -> Tuple[bool, str]:
    """
    Validate a phone number typed into the form.

    Returns:
        Tuple of (is_valid: bool, error_message: str)
        - (True, "") if valid
        - (False, "Phone number is required") if empty
        - (False, "Enter a valid phone number") if it has fewer than
          10 characters or anything besides digits, '+', '-' and spaces
    """
    if not phone:
        return False, FORM_FIELDS["phoneNumber"]
    if not PHONE_PATTERN.fullmatch(phone):
        return False, "Enter a valid phone number"
    return True, ""


def validate_email(email: str) -> Tuple[bool, str]:
    """
    Validate an email address typed into the form.

    Returns:
        Tuple of (is_valid: bool, error_message: str)
        - (True, "") if valid
        - (False, "Email is required") if empty
        - (False, "Enter a valid email address") if malformed
    """
    if not email:
        return False, FORM_FIELDS["email"]
    if not EMAIL_PATTERN.fullmatch(email):
        return False, "Enter a valid email address"
    return True, ""


def validate_registration_form(values: Mapping[str, Any]) -> Dict[str, str]:
    """
    Run the presentation-level checks on form input.

    These checks only guide the user; the API repeats the presence check.

    Args:
        values: Form values keyed by wire field name

    Returns:
        Mapping of field name -> error message, empty when the form is valid
    """
    errors: Dict[str, str] = {}

    for field, message in FORM_FIELDS.items():
        if is_missing(values.get(field)):
            errors[field] = message

    if "phoneNumber" not in errors:
        is_valid, message = validate_phone_number(values["phoneNumber"])
        if not is_valid:
            errors["phoneNumber"] = message

    if "email" not in errors:
        is_valid, message = validate_email(values["email"])
        if not is_valid:
            errors["email"] = message

    return errors
