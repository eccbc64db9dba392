from flask import Blueprint
from fittrack.utils.auth import require_auth
from fittrack.controllers.weight_controller import (
    list_weight_log_handler,
    create_weight_log_handler,
    delete_weight_log_handler,
)

weight_bp = Blueprint("weights", __name__, url_prefix="/api/weight-logs")

@weight_bp.get("")
@require_auth
def list_weight_logs():
    return list_weight_log_handler()


@weight_bp.post("")
@require_auth
def create_weight_log():
    return create_weight_log_handler()


@weight_bp.delete("/<uuid:log_id>")
@require_auth
def delete_weight_log(log_id):
    return delete_weight_log_handler(log_id)
