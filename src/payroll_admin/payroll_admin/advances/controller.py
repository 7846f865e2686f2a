from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_error, request_payload
from ..core.exceptions import DomainError
from ..container import Container

_EDITABLE = ("employee_id", "amount", "date", "deduction_month", "mode", "notes", "proof")


def register(app: Flask, container: Container) -> None:
    @app.route("/api/advances", methods=["GET"], endpoint="api_advances")
    def api_advances():
        employee_id = request.args.get("employee_id", type=int)
        items = container.advance_service.list_all(employee_id=employee_id)
        return jsonify([a.to_dict() for a in items])

    @app.route("/api/advances", methods=["POST"], endpoint="api_advances_create")
    def api_advances_create():
        data = request_payload()
        try:
            advance_id = container.advance_service.give(
                employee_id=int(data.get("employee_id") or 0),
                amount=data.get("amount"),
                given_on=data.get("date"),
                deduction_month=data.get("deduction_month"),
                mode=data.get("mode", ""),
                notes=data.get("notes", ""),
                proof=data.get("proof"),
            )
            return jsonify(container.advance_service.get(advance_id).to_dict()), 201
        except DomainError as e:
            return json_error(e)

    @app.route("/api/advances/<int:advance_id>", methods=["PUT"], endpoint="api_advances_update")
    def api_advances_update(advance_id: int):
        data = request_payload()
        changes = {k: data[k] for k in _EDITABLE if k in data}
        try:
            return jsonify(container.advance_service.update(advance_id, changes).to_dict())
        except DomainError as e:
            return json_error(e)

    @app.route("/api/advances/<int:advance_id>", methods=["DELETE"], endpoint="api_advances_delete")
    def api_advances_delete(advance_id: int):
        try:
            container.advance_service.delete(advance_id)
        except DomainError as e:
            return json_error(e)
        return jsonify({"success": True})
