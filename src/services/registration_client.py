"""HTTP client used by the registration page to submit the form."""
import logging
from datetime import datetime
from typing import Any, Dict, Mapping, Optional, Tuple

import httpx

from src.utils.date_utils import utc_now_iso

logger = logging.getLogger(__name__)

REGISTRATION_PATH = "/api/guest-speaker"
FALLBACK_ERROR_MESSAGE = "Please try again or contact us for assistance."


def build_payload(values: Mapping[str, Any], now: Optional[datetime] = None) -> Dict[str, str]:
    """
    Serialize form values into the request body.

    Args:
        values: Form values keyed by wire field name
        now: Submission moment (default: current time)

    Returns:
        Request body with a client-generated submittedAt
    """
    return {
        "submittedAt": utc_now_iso(now),
        "name": values.get("name", ""),
        "rollNumber": values.get("rollNumber", ""),
        "class": values.get("class", ""),
        "phoneNumber": values.get("phoneNumber", ""),
        "email": values.get("email", ""),
    }


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return FALLBACK_ERROR_MESSAGE

    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return FALLBACK_ERROR_MESSAGE


def submit_registration(
    values: Mapping[str, Any],
    base_url: str,
    timeout_s: float = 10.0,
    transport: Optional[httpx.BaseTransport] = None
) -> Tuple[bool, str]:
    """
    Post a registration to the API.

    Args:
        values: Form values keyed by wire field name
        base_url: API root, e.g. "http://127.0.0.1:5000"
        timeout_s: Request timeout in seconds
        transport: Optional httpx transport (tests use httpx.MockTransport)

    Returns:
        Tuple of (success: bool, message: str)
        - (True, server message) on a 2xx response
        - (False, server message) when the API rejects the registration
        - (False, FALLBACK_ERROR_MESSAGE) when no message is available
    """
    payload = build_payload(values)

    try:
        with httpx.Client(base_url=base_url, timeout=timeout_s, transport=transport) as client:
            response = client.post(REGISTRATION_PATH, json=payload)
    except httpx.HTTPError as e:
        logger.error(f"Registration request to {base_url} failed: {e}")
        return False, FALLBACK_ERROR_MESSAGE

    if response.is_success:
        try:
            message = response.json().get("message", "")
        except (ValueError, AttributeError):
            message = ""
        return True, message or "Registration submitted successfully"

    logger.warning(f"Registration rejected with status {response.status_code}")
    return False, _error_message(response)
