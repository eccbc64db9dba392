"""
Meal Controller Module

Meal logging for the authenticated user: list by date range, log, delete.
"""

from flask import request, current_app
from fittrack.extensions import db
from fittrack.schemas.log_schema import MealLogSchema
from fittrack.services.errors import ServiceError
from fittrack.services.meal_log_service import list_meal_logs, create_meal_log, delete_meal_log
from fittrack.utils.http import ok, error, json_body, arg_date, validate_schema, service_error


def list_meal_log_handler():
    """
    List the caller's meals, newest first.

    Query Parameters:
        - start: First day, YYYY-MM-DD (default: today)
        - end: Last day inclusive, YYYY-MM-DD (default: today)
    """
    try:
        start = arg_date("start")
        end = arg_date("end")
    except ValueError:
        return error("VALIDATION_ERROR", "start and end must be in YYYY-MM-DD format", 400)
    if start and end and end < start:
        return error("VALIDATION_ERROR", "end must not be before start", 400)

    return ok({"items": list_meal_logs(request.user_id, start, end)})


def create_meal_log_handler():
    """
    Log a meal.

    Body Parameters:
        - food_id (required): Catalog food item
        - category (required): breakfast | lunch | dinner | snack
        - servings (optional): Number of servings (default: 1.0, min 0.1)
        - logged_at (optional): Timestamp of the meal (ISO format, default: now)
    """
    data, errors = validate_schema(MealLogSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid meal log", 400, details=errors)

    try:
        result = create_meal_log(
            user_id=request.user_id,
            food_id=data["food_id"],
            servings=data["servings"],
            category=data["category"],
            logged_at=data.get("logged_at"),
        )
        return ok(result, 201)
    except ServiceError as e:
        return service_error(e)
    except Exception as e:
        db.session.rollback()
        current_app.logger.exception("Error logging meal")
        return error("UNKNOWN_ERROR", str(e), 500)


def delete_meal_log_handler(meal_id):
    try:
        if not delete_meal_log(request.user_id, meal_id):
            return error("NOT_FOUND", "Meal log not found", 404)
        return ok({"message": "Meal log deleted"})
    except Exception as e:
        db.session.rollback()
        current_app.logger.exception("Error deleting meal")
        return error("UNKNOWN_ERROR", str(e), 500)
