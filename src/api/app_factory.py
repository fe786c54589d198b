"""Flask application factory for the registration API."""
import logging
from typing import Optional

from flask import Flask

from src.api.guest_speaker import bp as guest_speaker_bp
from src.services.registration_service import RegistrationService
from src.services.registration_storage import RegistrationStorage
from src.services.storage_service import create_document_store
from src.utils.config import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, store=None) -> Flask:
    """
    Create the API app.

    Args:
        settings: Runtime settings (default: read from the environment)
        store: Document store client to write to (default: built from settings)

    Returns:
        Flask app with the registration route mounted
    """
    settings = settings or get_settings()
    if store is None:
        store = create_document_store(settings.store_backend, settings.store_path)

    app = Flask(__name__)
    app.config["REGISTRATION_SETTINGS"] = settings

    storage = RegistrationStorage(store, collection_name=settings.collection)
    app.extensions["registration_service"] = RegistrationService(storage)
    app.register_blueprint(guest_speaker_bp)

    logger.info(
        f"Registration API ready (backend={settings.store_backend}, "
        f"collection={settings.collection})"
    )
    return app
