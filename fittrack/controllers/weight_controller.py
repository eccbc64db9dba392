from flask import request, current_app
from fittrack.extensions import db
from fittrack.schemas.log_schema import WeightLogSchema
from fittrack.services.constants import DEFAULT_HISTORY_LIMIT
from fittrack.services.weight_service import list_weight_logs, create_weight_log, delete_weight_log
from fittrack.utils.http import ok, error, json_body, arg_int, validate_schema


def list_weight_log_handler():
    limit = arg_int("limit", DEFAULT_HISTORY_LIMIT, min_value=1, max_value=365)
    return ok(list_weight_logs(request.user_id, limit))


def create_weight_log_handler():
    data, errors = validate_schema(WeightLogSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid weight log", 400, details=errors)

    try:
        return ok(create_weight_log(request.user_id, data["weight"], data.get("date")), 201)
    except Exception as e:
        db.session.rollback()
        current_app.logger.exception("Error logging weight")
        return error("UNKNOWN_ERROR", str(e), 500)


def delete_weight_log_handler(log_id):
    try:
        if not delete_weight_log(request.user_id, log_id):
            return error("NOT_FOUND", "Weight log not found", 404)
        return ok({"message": "Weight log deleted"})
    except Exception as e:
        db.session.rollback()
        current_app.logger.exception("Error deleting weight log")
        return error("UNKNOWN_ERROR", str(e), 500)
