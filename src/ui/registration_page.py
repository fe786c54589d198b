"""Guest speaker registration page."""
import logging
import time
from typing import Dict, MutableMapping, Optional

import streamlit as st

from src.models.event import EventDetails
from src.services.event_service import get_event_details
from src.services.registration_client import submit_registration
from src.ui.html_utils import html_block, text
from src.utils.config import Settings, get_settings
from src.utils.validation import validate_registration_form

logger = logging.getLogger(__name__)

STATUS_KEY = "registration_status"
SUCCESS_AT_KEY = "registration_success_at"
PENDING_KEY = "registration_pending_values"
ERROR_KEY = "registration_error"

STATUS_IDLE = "idle"
STATUS_SUBMITTING = "submitting"
STATUS_SUCCESS = "success"

# How often the success banner checks whether to revert to idle
SUCCESS_POLL_SECONDS = 0.5

# (widget label, placeholder) per wire field, in form order
FORM_INPUTS = {
    "name": ("Full Name *", "John Doe"),
    "rollNumber": ("Roll Number *", "241000X00XX"),
    "class": ("Class / Year *", "CSE • 3rd Year"),
    "phoneNumber": ("Phone Number *", "+91 98765 43210"),
    "email": ("Email Address *", "you@college.edu"),
}

SUBMIT_LABELS = {
    STATUS_IDLE: "📝 Register Now",
    STATUS_SUBMITTING: "⏳ Submitting...",
    STATUS_SUCCESS: "✅ Registered!",
}


def _input_key(field: str) -> str:
    """Build the session-state key for a form input."""
    return f"guest_speaker_{field}"


def resolve_status(
    status: str,
    success_at: Optional[float],
    now: float,
    reset_seconds: float
) -> str:
    """Return the status to render, reverting success to idle once the delay has passed."""
    if status == STATUS_SUCCESS and success_at is not None and now - success_at >= reset_seconds:
        return STATUS_IDLE
    return status


def submit_button_label(status: str) -> str:
    return SUBMIT_LABELS.get(status, SUBMIT_LABELS[STATUS_IDLE])


def begin_submission(state: MutableMapping, values: Dict[str, str]) -> None:
    """Queue checked form values; the next run renders 'submitting' and sends them."""
    state[PENDING_KEY] = dict(values)
    state[STATUS_KEY] = STATUS_SUBMITTING


def take_pending_values(state: MutableMapping) -> Optional[Dict[str, str]]:
    """
    Pop the queued values if a submission is waiting.

    A submitting status with nothing queued (e.g. a lost session) falls
    back to idle.
    """
    if state.get(STATUS_KEY) != STATUS_SUBMITTING:
        return None

    values = state.pop(PENDING_KEY, None)
    if values is None:
        state[STATUS_KEY] = STATUS_IDLE
    return values


def finish_submission(state: MutableMapping, success: bool, now: float, message: str = "") -> None:
    """Move to success (stamping the time) or back to idle with the error to show."""
    if success:
        state[STATUS_KEY] = STATUS_SUCCESS
        state[SUCCESS_AT_KEY] = now
        state.pop(ERROR_KEY, None)
    else:
        state[STATUS_KEY] = STATUS_IDLE
        state[SUCCESS_AT_KEY] = None
        state[ERROR_KEY] = message


def render_event_header(event: EventDetails) -> str:
    """Build the HTML card shown above the form."""
    description = f"<p class='event-description'>{text(event.description)}</p>" if event.description else ""
    return html_block(
        f"""
        <div class="event-header">
            <span class="event-date">📅 {text(event.date_label)}</span>
            <h1>{text(event.title)}</h1>
            {description}
        </div>
        """
    )


def _ensure_state() -> None:
    """Ensure registration state keys exist."""
    if STATUS_KEY not in st.session_state:
        st.session_state[STATUS_KEY] = STATUS_IDLE
    if SUCCESS_AT_KEY not in st.session_state:
        st.session_state[SUCCESS_AT_KEY] = None


def _reset_form() -> None:
    """Clear every input so the next render starts from empty fields."""
    for field in FORM_INPUTS:
        st.session_state.pop(_input_key(field), None)


def _collect_values() -> Dict[str, str]:
    return {
        field: st.session_state.get(_input_key(field), "").strip()
        for field in FORM_INPUTS
    }


def _send_pending(settings: Settings) -> None:
    """Send queued values; runs after the form has rendered in its submitting state."""
    values = take_pending_values(st.session_state)
    if values is None:
        return

    with st.spinner(submit_button_label(STATUS_SUBMITTING)):
        success, message = submit_registration(
            values,
            base_url=settings.api_url,
            timeout_s=settings.timeout_seconds,
        )

    finish_submission(st.session_state, success, time.time(), message)

    if success:
        st.toast(message, icon="🎉")
        _reset_form()
    # Rerun so the button leaves its submitting state
    st.rerun()


def _render_form() -> None:
    status = st.session_state[STATUS_KEY]

    with st.form("guest_speaker_registration_form"):
        st.markdown("### Register for the Event")
        st.caption("Fill in your details to register. All fields are mandatory.")

        left, right = st.columns(2)
        layout = {"name": left, "rollNumber": right, "class": left, "phoneNumber": right}
        for field, (label, placeholder) in FORM_INPUTS.items():
            container = layout.get(field, st)
            container.text_input(label, key=_input_key(field), placeholder=placeholder)

        st.caption("By registering, you agree to receive event updates via email and phone.")
        submitted = st.form_submit_button(
            submit_button_label(status),
            type="primary",
            disabled=status != STATUS_IDLE,
        )

    if not submitted:
        return

    values = _collect_values()
    errors = validate_registration_form(values)
    if errors:
        for field, message in errors.items():
            st.error(f"{FORM_INPUTS[field][0].rstrip(' *')}: {message}")
        return

    begin_submission(st.session_state, values)
    st.rerun()


def _render_event_details(event: EventDetails) -> None:
    st.markdown("#### Event Details")
    date_col, speaker_col = st.columns(2)
    with date_col:
        st.markdown("**Date & Time**")
        st.caption(event.date_label)
    with speaker_col:
        st.markdown("**Speaker**")
        st.caption(event.speaker_name)
        if event.speaker_bio:
            st.caption(event.speaker_bio)
    if event.contact_email:
        st.caption(f"For any queries, contact us at {event.contact_email}")


@st.fragment(run_every=SUCCESS_POLL_SECONDS)
def _success_banner(reset_seconds: float) -> None:
    """Show the confirmation and rerun the page once the success delay has passed."""
    status = st.session_state.get(STATUS_KEY)
    if status != STATUS_SUCCESS:
        return

    st.success("🎉 Registration Successful! You have been registered for the guest speaker event.")

    next_status = resolve_status(
        status, st.session_state.get(SUCCESS_AT_KEY), time.time(), reset_seconds
    )
    if next_status != status:
        st.session_state[STATUS_KEY] = next_status
        st.rerun(scope="app")


def render_registration_page(settings: Optional[Settings] = None) -> None:
    """Render the event header, the registration form and the event details."""
    settings = settings or get_settings()
    _ensure_state()

    try:
        event = get_event_details(settings.event_file)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Could not load event details: {e}")
        event = None

    if event is not None:
        st.markdown(render_event_header(event), unsafe_allow_html=True)

    _render_form()

    error = st.session_state.pop(ERROR_KEY, None)
    if error:
        st.error(f"❌ Submission failed: {error}")

    _send_pending(settings)

    if st.session_state[STATUS_KEY] == STATUS_SUCCESS:
        _success_banner(settings.success_reset_seconds)

    if event is not None:
        _render_event_details(event)
