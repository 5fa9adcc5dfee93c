from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.http import admin_required, admin_secret, domain_error_response, error_response, json_payload
from ..container import Container
from ..core.exceptions import DomainError
from .masking import mask_document
from .model import Session, SessionsDocument
from .service import RegistrationService

logger = logging.getLogger(__name__)


def _session_view(session: Session) -> dict:
    return {**session.to_dict(), **session.occupancy()}


def _document_view(document: SessionsDocument) -> dict:
    return {**document.to_dict(), "sessions": [_session_view(s) for s in document.sessions]}


def _register_family(app: Flask, container: Container, *, prefix: str, roster: str, service: RegistrationService) -> None:
    """Routes for one session family, e.g. /api/sessions/<sid>/employees/<rid>."""
    kind = service.kind.value
    admin = admin_required(container.admin_auth)

    def _can_see_contacts() -> bool:
        return container.admin_auth.verify(admin_secret())

    @app.route(prefix, methods=["GET"], endpoint=f"{kind}_list")
    def list_sessions():
        try:
            document = _document_view(service.list_sessions())
            return jsonify(document if _can_see_contacts() else mask_document(document))
        except Exception:
            logger.exception("Failed to fetch %s sessions", kind)
            return error_response("Failed to fetch sessions", 500)

    @app.route(f"{prefix}/<session_id>", methods=["GET"], endpoint=f"{kind}_get")
    def get_session(session_id: str):
        try:
            session = _session_view(service.get_session(session_id))
            if not _can_see_contacts():
                session = mask_document({"sessions": [session]})["sessions"][0]
            return jsonify(session)
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Failed to fetch %s session %s", kind, session_id)
            return error_response("Failed to fetch session", 500)

    @app.route(f"{prefix}/<session_id>/{roster}", methods=["POST"], endpoint=f"{kind}_add")
    @admin
    def add_registration(session_id: str):
        try:
            registration = service.add_registration(session_id, json_payload())
            return jsonify(registration.to_dict()), 201
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Failed to add %s registration", kind)
            return error_response("Failed to add registration", 500)

    @app.route(f"{prefix}/<session_id>/{roster}/<registration_id>", methods=["PUT"], endpoint=f"{kind}_update")
    @admin
    def update_registration(session_id: str, registration_id: str):
        try:
            registration = service.update_registration(session_id, registration_id, json_payload())
            return jsonify(registration.to_dict())
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Failed to update %s registration %s", kind, registration_id)
            return error_response("Failed to update registration", 500)

    @app.route(f"{prefix}/<session_id>/{roster}/<registration_id>", methods=["DELETE"], endpoint=f"{kind}_delete")
    @admin
    def delete_registration(session_id: str, registration_id: str):
        try:
            service.remove_registration(session_id, registration_id)
            return jsonify({"success": True})
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Failed to delete %s registration %s", kind, registration_id)
            return error_response("Failed to delete registration", 500)


def register(app: Flask, container: Container) -> None:
    _register_family(app, container, prefix="/api/sessions", roster="employees", service=container.benefits_service)
    _register_family(
        app, container, prefix="/api/biometrics", roster="registrations", service=container.biometrics_service
    )

    @app.route("/api/migrate-capacity", methods=["POST"], endpoint="migrate_capacity")
    @admin_required(container.admin_auth)
    def migrate_capacity():
        try:
            updated = container.capacity_migration.migrate()
            return jsonify(
                {
                    "success": True,
                    "message": f"Spanish-only sessions capacity updated to {container.capacity_migration.target_capacity}",
                    "updatedSessions": updated,
                }
            )
        except Exception:
            logger.exception("Failed to migrate capacity")
            return error_response("Failed to migrate capacity", 500)
