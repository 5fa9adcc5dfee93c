from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/validate-password", methods=["POST"], endpoint="validate_password")
    def validate_password():
        body = request.get_json(silent=True)
        password = body.get("password") if isinstance(body, dict) else None

        if not password:
            return jsonify({"error": "Password is required", "valid": False}), 400

        valid = container.admin_auth.verify(password)
        if not valid:
            logger.warning("Rejected admin password attempt from %s", request.remote_addr)
        return jsonify({"valid": valid})
