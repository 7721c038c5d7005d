from flask import current_app, jsonify
from punchcard.exceptions import ApiError, UnknownError
from punchcard.extensions import db


def success(status_code=200, **payload):
    return jsonify({"status": "success", **payload}), status_code


def error_response(error: ApiError):
    return jsonify(error.to_dict()), error.status_code


def unexpected_error(operation: str, error: Exception):
    db.session.rollback()
    current_app.logger.error(f"{operation} failed: {str(error)}")
    return error_response(UnknownError())
