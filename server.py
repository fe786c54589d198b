"""
Registration API server.

Run with `python server.py` (development) or any WSGI server pointed at
`server:app`.
"""
import os

from src.api.app_factory import create_app
from src.utils.config import configure_logging, get_settings

settings = get_settings()
configure_logging(settings.log_level)

app = create_app(settings)


if __name__ == "__main__":
    app.run(
        host=os.getenv("REGISTRATION_API_HOST", "127.0.0.1"),
        port=int(os.getenv("REGISTRATION_API_PORT", "5000")),
    )
