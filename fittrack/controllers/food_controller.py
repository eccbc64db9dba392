"""
Food Controller Module

Handles the shared food catalog:
- Search and pagination
- Lookup by id or barcode
- Adding new items
"""

from flask import current_app
from fittrack.extensions import db
from fittrack.schemas.food_schema import FoodItemSchema
from fittrack.services.errors import ServiceError
from fittrack.services.food_service import (
    list_foods,
    get_food,
    get_food_by_barcode,
    create_food,
    serialize_food,
)
from fittrack.utils.http import ok, error, json_body, arg_int, arg_str, validate_schema, service_error


def list_foods_handler():
    """
    List food items ordered by name.

    Query Parameters:
        - search: Case-insensitive name filter
        - page: Page number (default: 1)
        - limit: Items per page (default: 50, max: 200)
    """
    page = arg_int("page", 1, min_value=1)
    limit = arg_int("limit", 50, min_value=1, max_value=200)
    search = (arg_str("search") or "").strip()
    return ok(list_foods(search=search, page=page, limit=limit))


def get_food_handler(food_id):
    food = get_food(food_id)
    if not food:
        return error("NOT_FOUND", "Food item not found", 404)
    return ok(serialize_food(food))


def get_food_by_barcode_handler(barcode: str):
    food = get_food_by_barcode(barcode.strip())
    if not food:
        return error("NOT_FOUND", "No food item with this barcode", 404)
    return ok(serialize_food(food))


def create_food_handler():
    data, errors = validate_schema(FoodItemSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid food item", 400, details=errors)

    try:
        food = create_food(data)
        return ok(serialize_food(food), 201)
    except ServiceError as e:
        return service_error(e)
    except Exception as e:
        db.session.rollback()
        current_app.logger.exception("Error adding food item")
        return error("UNKNOWN_ERROR", str(e), 500)
