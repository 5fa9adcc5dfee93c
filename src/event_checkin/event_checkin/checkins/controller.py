from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.http import admin_required, domain_error_response, error_response, json_payload
from ..container import Container
from ..core.exceptions import ConflictError, DomainError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    checkins = container.checkin_service

    @app.route("/api/checkins", methods=["GET"], endpoint="checkins_list")
    def list_check_ins():
        try:
            return jsonify([c.to_dict() for c in checkins.list_check_ins()])
        except Exception:
            logger.exception("Failed to fetch check-ins")
            return error_response("Failed to fetch check-ins", 500)

    @app.route("/api/checkins", methods=["POST"], endpoint="checkins_create")
    def create_check_in():
        body = json_payload()
        try:
            record = checkins.check_in(
                employee_id=body.get("employeeId"),
                employee_name=body.get("employeeName"),
                food_tickets=body.get("foodTickets"),
                notes=body.get("notes"),
            )
            return jsonify(record.to_dict()), 201
        except ConflictError as e:
            return domain_error_response(e, checkIn=e.existing.to_dict() if e.existing else None)
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Failed to create check-in")
            return error_response("Failed to create check-in", 500)

    @app.route("/api/checkins/summary", methods=["GET"], endpoint="checkins_summary")
    def check_in_summary():
        try:
            return jsonify(checkins.summary().to_dict())
        except Exception:
            logger.exception("Failed to summarise check-ins")
            return error_response("Failed to summarise check-ins", 500)

    @app.route("/api/checkins/sessions", methods=["GET"], endpoint="checkins_sessions")
    def employee_sessions():
        first_name = (request.args.get("firstName") or "").strip()
        last_name = (request.args.get("lastName") or "").strip()
        if not first_name or not last_name:
            return error_response("firstName and lastName are required", 400)
        try:
            found = checkins.find_employee_sessions(
                email=request.args.get("email"),
                first_name=first_name,
                last_name=last_name,
            )
            return jsonify(found.to_dict())
        except Exception:
            logger.exception("Failed to look up sessions for %s %s", first_name, last_name)
            return error_response("Failed to fetch sessions", 500)

    @app.route("/api/checkins/<checkin_id>", methods=["GET"], endpoint="checkins_get")
    def get_check_in(checkin_id: str):
        try:
            return jsonify(checkins.get_check_in(checkin_id).to_dict())
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Failed to fetch check-in %s", checkin_id)
            return error_response("Failed to fetch check-in", 500)

    @app.route("/api/checkins/<checkin_id>", methods=["DELETE"], endpoint="checkins_delete")
    @admin_required(container.admin_auth)
    def delete_check_in(checkin_id: str):
        try:
            checkins.delete_check_in(checkin_id)
            return jsonify({"message": "Check-in deleted successfully"})
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Failed to delete check-in %s", checkin_id)
            return error_response("Failed to delete check-in", 500)
