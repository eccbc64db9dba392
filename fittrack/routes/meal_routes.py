from flask import Blueprint
from fittrack.utils.auth import require_auth
from fittrack.controllers.meal_controller import (
    list_meal_log_handler,
    create_meal_log_handler,
    delete_meal_log_handler,
)

meal_bp = Blueprint("meals", __name__, url_prefix="/api/meal-logs")

@meal_bp.get("")
@require_auth
def list_meal_logs():
    return list_meal_log_handler()


@meal_bp.post("")
@require_auth
def create_meal_log():
    return create_meal_log_handler()


@meal_bp.delete("/<uuid:meal_id>")
@require_auth
def delete_meal_log(meal_id):
    return delete_meal_log_handler(meal_id)
