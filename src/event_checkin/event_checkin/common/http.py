from __future__ import annotations

from functools import wraps
from typing import Any, Optional

from flask import jsonify, request

from ..auth.service import AdminSecretVerifier
from ..core.constants import ADMIN_PASSWORD_HEADER
from ..core.exceptions import (
    AuthorizationError,
    CapacityExceededError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)

STATUS_BY_ERROR: list[tuple[type, int]] = [
    (ValidationError, 400),
    (CapacityExceededError, 400),
    (AuthorizationError, 401),
    (NotFoundError, 404),
    (ConflictError, 409),
]


def error_response(message: str, status: int, **extra: Any):
    return jsonify({"error": message, **extra}), status


def domain_error_response(error: DomainError, **extra: Any):
    status = next((code for cls, code in STATUS_BY_ERROR if isinstance(error, cls)), 400)
    return error_response(str(error), status, **extra)


def _raw_body() -> dict[str, Any]:
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else {}


def json_payload() -> dict[str, Any]:
    """Request JSON object without the admin password field."""
    return {k: v for k, v in _raw_body().items() if k != "password"}


def admin_secret() -> Optional[str]:
    """Admin password from the header, else from the JSON body."""
    return request.headers.get(ADMIN_PASSWORD_HEADER) or _raw_body().get("password")


def admin_required(verifier: AdminSecretVerifier):
    """Single gate for every mutating/admin endpoint."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                verifier.require(admin_secret())
            except AuthorizationError as e:
                return domain_error_response(e)
            return view(*args, **kwargs)

        return wrapper

    return decorator
