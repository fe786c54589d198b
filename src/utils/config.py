"""Runtime settings read from the environment (and an optional .env file)."""
import logging
import os
from dataclasses import dataclass
from threading import Lock

from dotenv import find_dotenv, load_dotenv

_ENV_LOADED = False
_ENV_LOCK = Lock()

DEFAULT_COLLECTION = "guest-speaker-registrations"


def _load_env() -> None:
    """Load variables from .env once; real environment values win."""
    global _ENV_LOADED

    if _ENV_LOADED:
        return

    with _ENV_LOCK:
        if _ENV_LOADED:
            return
        load_dotenv(find_dotenv(usecwd=True), override=False)
        _ENV_LOADED = True


@dataclass(frozen=True)
class Settings:
    """Configuration shared by the API server and the registration page."""

    store_backend: str = "json"
    store_path: str = "data/registrations.json"
    collection: str = DEFAULT_COLLECTION
    api_url: str = "http://127.0.0.1:5000"
    timeout_seconds: float = 10.0
    success_reset_seconds: float = 3.0
    event_file: str = "data/event.json"
    log_level: str = "INFO"

    def __post_init__(self):
        """Validate settings after initialization."""
        if self.store_backend not in ("json", "memory"):
            raise ValueError(f"Unknown store backend: {self.store_backend}")

        if not self.collection or not self.collection.strip():
            raise ValueError("Collection name cannot be empty")

        if self.timeout_seconds <= 0:
            raise ValueError("Timeout must be positive")


def get_settings() -> Settings:
    """
    Build settings from environment variables.

    Variables:
        REGISTRATION_STORE_BACKEND: "json" (default) or "memory"
        REGISTRATION_STORE_PATH: JSON store file
        REGISTRATION_COLLECTION: collection that receives registrations
        REGISTRATION_API_URL: base URL the registration page posts to
        REGISTRATION_TIMEOUT_SECONDS: HTTP timeout for the page
        SUCCESS_RESET_SECONDS: how long the success state stays visible
        EVENT_FILE: JSON file with the event details
        LOG_LEVEL: logging level name

    Raises:
        ValueError: If a value cannot be parsed or is out of range
    """
    _load_env()

    return Settings(
        store_backend=os.getenv("REGISTRATION_STORE_BACKEND", "json").strip().lower(),
        store_path=os.getenv("REGISTRATION_STORE_PATH", "data/registrations.json"),
        collection=os.getenv("REGISTRATION_COLLECTION", DEFAULT_COLLECTION),
        api_url=os.getenv("REGISTRATION_API_URL", "http://127.0.0.1:5000").rstrip("/"),
        timeout_seconds=float(os.getenv("REGISTRATION_TIMEOUT_SECONDS", "10")),
        success_reset_seconds=float(os.getenv("SUCCESS_RESET_SECONDS", "3")),
        event_file=os.getenv("EVENT_FILE", "data/event.json"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


def configure_logging(level: str = "INFO") -> None:
    """Apply a basic root logging configuration for the entry points."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
