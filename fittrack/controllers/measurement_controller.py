from flask import request, current_app
from fittrack.extensions import db
from fittrack.schemas.log_schema import MeasurementSchema
from fittrack.services.constants import DEFAULT_HISTORY_LIMIT
from fittrack.services.measurement_service import list_measurements, create_measurement, delete_measurement
from fittrack.utils.http import ok, error, json_body, arg_int, validate_schema


def list_measurements_handler():
    limit = arg_int("limit", DEFAULT_HISTORY_LIMIT, min_value=1, max_value=365)
    return ok({"items": list_measurements(request.user_id, limit)})


def create_measurement_handler():
    """
    Record body measurements in cm. Every circumference is optional.
    """
    data, errors = validate_schema(MeasurementSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid measurements", 400, details=errors)

    try:
        return ok(create_measurement(request.user_id, data), 201)
    except Exception as e:
        db.session.rollback()
        current_app.logger.exception("Error logging measurements")
        return error("UNKNOWN_ERROR", str(e), 500)


def delete_measurement_handler(measurement_id):
    try:
        if not delete_measurement(request.user_id, measurement_id):
            return error("NOT_FOUND", "Measurement not found", 404)
        return ok({"message": "Measurement deleted"})
    except Exception as e:
        db.session.rollback()
        current_app.logger.exception("Error deleting measurement")
        return error("UNKNOWN_ERROR", str(e), 500)
