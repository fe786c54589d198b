"""Registration record model for guest speaker events."""
from dataclasses import dataclass
from typing import Any, Dict, Mapping

# Wire names in declared order. Missing-field messages follow this order.
REQUIRED_FIELDS = (
    "submittedAt",
    "name",
    "rollNumber",
    "class",
    "phoneNumber",
    "email",
)


@dataclass(frozen=True)
class RegistrationRecord:
    """One attendee registration, normalized at the service boundary."""

    submitted_at: str  # ISO 8601, client generated
    name: str
    roll_number: str
    class_name: str
    phone_number: str
    email: str

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "RegistrationRecord":
        """
        Build a record from a checked wire payload.

        Only the six known keys are read; anything else in the payload is
        dropped. Callers must have verified presence first.
        """
        return cls(
            submitted_at=payload["submittedAt"],
            name=payload["name"],
            roll_number=payload["rollNumber"],
            class_name=payload["class"],
            phone_number=payload["phoneNumber"],
            email=payload["email"],
        )

    def to_document(self) -> Dict[str, str]:
        """Return the record keyed by wire names, in declared order."""
        return {
            "submittedAt": self.submitted_at,
            "name": self.name,
            "rollNumber": self.roll_number,
            "class": self.class_name,
            "phoneNumber": self.phone_number,
            "email": self.email,
        }
