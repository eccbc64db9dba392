from flask import Blueprint
from fittrack.utils.auth import require_auth
from fittrack.controllers.food_controller import (
    list_foods_handler,
    get_food_handler,
    get_food_by_barcode_handler,
    create_food_handler,
)

food_bp = Blueprint("foods", __name__, url_prefix="/api/foods")

@food_bp.route("", methods=["GET"])
@require_auth
def list_foods():
    return list_foods_handler()

@food_bp.route("", methods=["POST"])
@require_auth
def create_food():
    return create_food_handler()

@food_bp.route("/<uuid:food_id>", methods=["GET"])
@require_auth
def get_food(food_id):
    return get_food_handler(food_id)

@food_bp.route("/barcode/<string:barcode>", methods=["GET"])
@require_auth
def get_food_by_barcode(barcode):
    return get_food_by_barcode_handler(barcode)
