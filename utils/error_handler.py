from flask import jsonify, current_app
from pydantic import ValidationError
from werkzeug.exceptions import HTTPException

from models import db
from utils.errors import ApiError, InternalFailure, ValidationFailure


def _respond(err: ApiError, expose_detail: bool):
    body = {"success": False, "message": err.message}
    if expose_detail:
        body["error"] = err.detail
    return jsonify(body), err.status_code


def register_error_handlers(app, expose_detail: bool = False):
    """
    Install the terminal error normalizer.

    Every error raised while handling a request lands in exactly one of the
    handlers below and leaves as a ``{success: false, message}`` envelope.
    The session is rolled back first so a failed request never leaves a
    partial write behind.
    """

    @app.errorhandler(ApiError)
    def _api_error(err):
        db.session.rollback()
        current_app.logger.warning("%s %s: %s", err.status_code, type(err).__name__, err.message)
        return _respond(err, expose_detail)

    @app.errorhandler(ValidationError)
    def _schema_error(err):
        db.session.rollback()
        failure = ValidationFailure.from_pydantic(err)
        current_app.logger.warning("400 ValidationFailure: %s", failure.message)
        return _respond(failure, expose_detail)

    @app.errorhandler(HTTPException)
    def _http_error(err):
        # Errors that already carry an explicit status code keep it
        failure = ApiError(err.description or err.name)
        failure.status_code = err.code or 500
        return _respond(failure, expose_detail)

    @app.errorhandler(Exception)
    def _unexpected(err):
        db.session.rollback()
        current_app.logger.exception("Unhandled error: %s", err)
        return _respond(InternalFailure(detail=str(err)), expose_detail)
