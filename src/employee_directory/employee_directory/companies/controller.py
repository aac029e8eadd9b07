from __future__ import annotations

from flask import Flask, jsonify

from ..common.requests import json_body, text_field
from ..container import Container


def register(app: Flask, container: Container) -> None:
    gate = container.gate

    @app.route("/api/companies", methods=["GET"], endpoint="list_companies")
    @gate.token_required
    def list_companies():
        return jsonify([c.to_dict() for c in container.company_service.list_all()])

    @app.route("/api/companies", methods=["POST"], endpoint="create_company")
    @gate.admin_required
    def create_company():
        company = container.company_service.create(text_field(json_body(), "name"))
        return jsonify(company.to_dict()), 201

    @app.route("/api/companies/<company_id>", methods=["DELETE"], endpoint="delete_company")
    @gate.admin_required
    def delete_company(company_id: str):
        container.company_service.delete(company_id)
        return jsonify({"message": "Company deleted successfully"})
