"""Event details data model."""
from dataclasses import dataclass


@dataclass
class EventDetails:
    """Event shown above the registration form."""

    title: str
    date_label: str
    speaker_name: str
    description: str = ""
    speaker_bio: str = ""
    contact_email: str = ""

    def __post_init__(self):
        """Validate event data after initialization."""
        if not self.title or not self.title.strip():
            raise ValueError("Event title cannot be empty")

        if not self.date_label or not self.date_label.strip():
            raise ValueError("Event date cannot be empty")

        if not self.speaker_name or not self.speaker_name.strip():
            raise ValueError("Speaker name cannot be empty")
