from __future__ import annotations

from flask import Flask, jsonify

from ..common.requests import json_body, text_field
from ..container import Container


def register(app: Flask, container: Container) -> None:
    gate = container.gate

    @app.route("/api/departments", methods=["GET"], endpoint="list_departments")
    @gate.token_required
    def list_departments():
        return jsonify([d.to_dict() for d in container.department_service.list_all()])

    @app.route("/api/departments", methods=["POST"], endpoint="create_department")
    @gate.admin_required
    def create_department():
        department = container.department_service.create(text_field(json_body(), "name"))
        return jsonify(department.to_dict()), 201

    @app.route("/api/departments/<dept_id>", methods=["DELETE"], endpoint="delete_department")
    @gate.admin_required
    def delete_department(dept_id: str):
        container.department_service.delete(dept_id)
        return jsonify({"message": "Department deleted successfully"})
