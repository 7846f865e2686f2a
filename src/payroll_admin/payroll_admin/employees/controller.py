from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_error, request_payload
from ..core.exceptions import DomainError
from ..container import Container

_EDITABLE = ("name", "salary", "designation", "custom_id", "contact", "normal_hours", "slab_base_hours")


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="api_employees")
    def api_employees():
        return jsonify([e.to_dict() for e in container.employee_service.list_all()])

    @app.route("/api/employees", methods=["POST"], endpoint="api_employees_create")
    def api_employees_create():
        data = request_payload()
        try:
            employee_id = container.employee_service.create(
                name=data.get("name", ""),
                salary=data.get("salary"),
                designation=data.get("designation", ""),
                custom_id=data.get("custom_id"),
                contact=data.get("contact"),
                normal_hours=data.get("normal_hours"),
                slab_base_hours=data.get("slab_base_hours"),
            )
            return jsonify(container.employee_service.get(employee_id).to_dict()), 201
        except DomainError as e:
            return json_error(e)

    @app.route("/api/employees/<int:employee_id>", methods=["PUT"], endpoint="api_employees_update")
    def api_employees_update(employee_id: int):
        data = request_payload()
        changes = {k: data[k] for k in _EDITABLE if k in data}
        try:
            return jsonify(container.employee_service.update(employee_id, changes).to_dict())
        except DomainError as e:
            return json_error(e)

    @app.route("/api/employees/<int:employee_id>", methods=["DELETE"], endpoint="api_employees_delete")
    def api_employees_delete(employee_id: int):
        try:
            container.employee_service.delete(employee_id)
        except DomainError as e:
            return json_error(e)
        return jsonify({"success": True})
