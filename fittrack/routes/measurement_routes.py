from flask import Blueprint
from fittrack.utils.auth import require_auth
from fittrack.controllers.measurement_controller import (
    list_measurements_handler,
    create_measurement_handler,
    delete_measurement_handler,
)

measurement_bp = Blueprint("measurements", __name__, url_prefix="/api/measurements")

@measurement_bp.get("")
@require_auth
def list_measurements():
    return list_measurements_handler()


@measurement_bp.post("")
@require_auth
def create_measurement():
    return create_measurement_handler()


@measurement_bp.delete("/<uuid:measurement_id>")
@require_auth
def delete_measurement(measurement_id):
    return delete_measurement_handler(measurement_id)
