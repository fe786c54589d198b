"""HTTP endpoint for guest speaker registrations."""
import logging

from flask import Blueprint, current_app, jsonify, request
from werkzeug.exceptions import MethodNotAllowed

from src.utils.exceptions import MethodError, PersistenceError, ValidationError

logger = logging.getLogger(__name__)

bp = Blueprint("guest_speaker", __name__)

REGISTRATION_ROUTE = "/api/guest-speaker"

# Routed verbs reach the view, which answers 405 itself. Anything else the
# router rejects is rewritten by handle_unrouted_method.
ROUTED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def _method_not_allowed(allowed: str = "POST"):
    response = jsonify({"message": "Method not allowed"})
    response.status_code = 405
    response.headers["Allow"] = allowed
    return response


@bp.route(REGISTRATION_ROUTE, methods=ROUTED_METHODS, provide_automatic_options=False)
def register_guest_speaker():
    if request.method != "POST":
        raise MethodError(request.method)

    payload = request.get_json(silent=True, force=True)
    if not isinstance(payload, dict):
        payload = {}

    service = current_app.extensions["registration_service"]
    service.submit(payload)

    return jsonify({
        "success": True,
        "message": "Registration submitted successfully",
    }), 200


@bp.errorhandler(MethodError)
def handle_method_error(error: MethodError):
    return _method_not_allowed(error.allowed)


@bp.app_errorhandler(MethodNotAllowed)
def handle_unrouted_method(error: MethodNotAllowed):
    # Routing errors are raised before any blueprint view is chosen.
    if request.path != REGISTRATION_ROUTE:
        return error
    return _method_not_allowed()


@bp.errorhandler(ValidationError)
def handle_validation_error(error: ValidationError):
    return jsonify({"message": str(error)}), 400


@bp.errorhandler(PersistenceError)
def handle_persistence_error(error: PersistenceError):
    logger.error(f"Error processing registration: {error.__cause__ or error}")
    return jsonify({"message": "Failed to process registration"}), 500
