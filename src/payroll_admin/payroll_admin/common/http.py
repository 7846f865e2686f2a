from __future__ import annotations

from flask import jsonify, request

from ..core.exceptions import DomainError, DuplicateError, NotFoundError


def json_error(e: DomainError):
    status = 400
    if isinstance(e, NotFoundError):
        status = 404
    elif isinstance(e, DuplicateError):
        status = 409
    return jsonify({"success": False, "message": str(e)}), status


def request_payload() -> dict:
    """JSON body, or form fields when the client posts a form."""

    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()
