from __future__ import annotations

from flask import Flask, jsonify

from ..common.requests import json_body, text_field
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/auth/register", methods=["POST"], endpoint="auth_register")
    def auth_register():
        data = json_body()
        result = container.auth_service.register(text_field(data, "username"), text_field(data, "password"))
        return jsonify(result.to_dict())

    @app.route("/api/auth/login", methods=["POST"], endpoint="auth_login")
    def auth_login():
        data = json_body()
        result = container.auth_service.authenticate(text_field(data, "username"), text_field(data, "password"))
        return jsonify(result.to_dict())
