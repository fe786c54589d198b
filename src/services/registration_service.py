"""Registration service for guest speaker event sign-ups."""
import logging
from typing import Any, Mapping

from src.models.registration import RegistrationRecord
from src.services.registration_storage import RegistrationStorage
from src.utils.exceptions import PersistenceError, ValidationError
from src.utils.validation import find_missing_fields

logger = logging.getLogger(__name__)


class RegistrationService:
    """Validates inbound registrations and hands them to storage."""

    def __init__(self, storage: RegistrationStorage):
        self._storage = storage

    def submit(self, payload: Mapping[str, Any]) -> RegistrationRecord:
        """
        Register an attendee.

        Args:
            payload: Untyped key/value mapping from the request body

        Returns:
            The normalized record that was stored

        Raises:
            ValidationError: If any required field is absent, None or "";
                lists every missing field, nothing is written
            PersistenceError: If the write fails (no retry)

        Behavior:
            - Extra keys in the payload are dropped
            - Exactly one storage write per successful call
            - Identical submissions are stored as separate documents
        """
        missing = find_missing_fields(payload)
        if missing:
            raise ValidationError(missing)

        record = RegistrationRecord.from_payload(payload)

        try:
            self._storage.append(record)
        except PersistenceError:
            logger.error(f"Registration for {record.email!r} could not be persisted")
            raise
        except Exception as e:
            logger.error(f"Unexpected error during registration: {e}", exc_info=True)
            raise PersistenceError("Failed to save registration") from e

        logger.info(f"Registered {record.name!r} ({record.roll_number})")
        return record
