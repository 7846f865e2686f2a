from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_error, request_payload
from ..core.exceptions import DomainError
from ..container import Container

_EDITABLE = ("employee_id", "salary_month", "amount", "date", "mode", "notes", "proof")


def register(app: Flask, container: Container) -> None:
    @app.route("/api/payments", methods=["GET"], endpoint="api_payments")
    def api_payments():
        try:
            items = container.payment_service.list_all(
                employee_id=request.args.get("employee_id", type=int),
                salary_month=(request.args.get("salary_month") or "").strip() or None,
            )
        except DomainError as e:
            return json_error(e)
        return jsonify([p.to_dict() for p in items])

    @app.route("/api/payments", methods=["POST"], endpoint="api_payments_create")
    def api_payments_create():
        data = request_payload()
        try:
            payment_id = container.payment_service.pay(
                employee_id=int(data.get("employee_id") or 0),
                salary_month=data.get("salary_month", ""),
                amount=data.get("amount"),
                paid_on=data.get("date"),
                mode=data.get("mode", ""),
                notes=data.get("notes", ""),
                proof=data.get("proof"),
            )
            return jsonify(container.payment_service.get(payment_id).to_dict()), 201
        except DomainError as e:
            return json_error(e)

    @app.route("/api/payments/<int:payment_id>", methods=["PUT"], endpoint="api_payments_update")
    def api_payments_update(payment_id: int):
        data = request_payload()
        changes = {k: data[k] for k in _EDITABLE if k in data}
        try:
            return jsonify(container.payment_service.update(payment_id, changes).to_dict())
        except DomainError as e:
            return json_error(e)

    @app.route("/api/payments/<int:payment_id>", methods=["DELETE"], endpoint="api_payments_delete")
    def api_payments_delete(payment_id: int):
        try:
            container.payment_service.delete(payment_id)
        except DomainError as e:
            return json_error(e)
        return jsonify({"success": True})
