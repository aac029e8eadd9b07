from __future__ import annotations

import io

from flask import Flask, jsonify, send_file

from ..common.requests import json_body, query_arg
from ..container import Container


def register(app: Flask, container: Container) -> None:
    gate = container.gate

    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    @gate.token_required
    def list_employees():
        items = container.employee_query.list_employees(
            company_id=query_arg("companyId"),
            search=query_arg("search"),
        )
        return jsonify([item.to_dict() for item in items])

    @app.route("/api/employees", methods=["POST"], endpoint="create_employee")
    @gate.admin_required
    def create_employee():
        employee = container.employee_service.create(json_body())
        return jsonify(employee.to_dict()), 201

    @app.route("/api/employees/<employee_id>", methods=["PUT"], endpoint="update_employee")
    @gate.admin_required
    def update_employee(employee_id: str):
        employee = container.employee_service.update(employee_id, json_body())
        return jsonify(employee.to_dict())

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="delete_employee")
    @gate.admin_required
    def delete_employee(employee_id: str):
        container.employee_service.delete(employee_id)
        return jsonify({"message": "Employee deleted successfully"})

    @app.route("/api/employees/export", methods=["GET"], endpoint="export_employees")
    @gate.token_required
    def export_employees():
        export = container.employee_exporter.export(query_arg("companyId"))
        return send_file(
            io.BytesIO(export.content),
            mimetype=export.mimetype,
            as_attachment=True,
            download_name=export.filename,
        )
