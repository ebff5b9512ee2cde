from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..attendance.ingest import punches_from_records
from ..common.datetime_utils import parse_iso_date
from ..container import Container
from ..core.exceptions import DomainError, ValidationError
from ..schedules.settings import schedule_from_settings
from ..users.ingest import worker_from_record
from .report import report_payload

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _parse_date(value, field_name: str):
        if not value:
            raise ValidationError(f"Missing {field_name}")
        try:
            return parse_iso_date(str(value))
        except ValueError:
            raise ValidationError(f"{field_name} must be YYYY-MM-DD") from None

    @app.route("/api/productivity", methods=["POST"], endpoint="api_productivity")
    def api_productivity():
        """Run the productivity engine for one worker over one date range."""
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({"success": False, "message": "Expected a JSON object"}), 400

        try:
            report = container.productivity_service.compute_productivity(
                punches_from_records(data.get("punches") or []),
                _parse_date(data.get("from_date"), "from_date"),
                _parse_date(data.get("to_date"), "to_date"),
                schedule_from_settings(data.get("schedule") or {}),
                worker_from_record(data.get("worker") or {}),
                selected_batch_name=data.get("batch"),
            )
        except DomainError as e:
            logger.info("productivity request rejected: %s", e)
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("productivity computation failed")
            return jsonify({"success": False, "message": "Internal error while computing productivity"}), 500

        payload = report_payload(report, currency_symbol=container.currency_symbol)
        payload["success"] = True
        return jsonify(payload), 200
