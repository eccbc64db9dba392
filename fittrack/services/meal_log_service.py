"""
Meal Log Service

Handles meal logging operations including creation, retrieval and deletion.
Every query is scoped to the owning user.
"""

import logging
from datetime import date, datetime
from typing import Any, Dict, List, Optional
from uuid import UUID

from sqlalchemy import desc

from fittrack.extensions import db
from fittrack.models.meal_log import MealLog
from fittrack.services.errors import NotFoundError
from fittrack.services.food_service import get_food, serialize_food
from fittrack.services.nutrition_service import meal_nutrition, round_half_up
from fittrack.utils.dates import range_bounds, to_utc_naive, utc_now

logger = logging.getLogger(__name__)


def serialize_meal_log(meal: MealLog) -> Dict[str, Any]:
    nutrition = meal_nutrition(meal)
    return {
        "id": str(meal.id),
        "user_id": str(meal.user_id),
        "food_id": str(meal.food_id),
        "servings": float(meal.servings),
        "category": meal.category,
        "logged_at": meal.logged_at.isoformat() if meal.logged_at else None,
        "created_at": meal.created_at.isoformat() if meal.created_at else None,
        "food_item": serialize_food(meal.food_item) if meal.food_item else None,
        "calories": round_half_up(nutrition["calories"]),
    }


def meals_between(user_id: UUID, start: datetime, end: Optional[datetime] = None, newest_first: bool = True) -> List[MealLog]:
    """Meal logs with ``start <= logged_at < end``, food items joined."""
    query = MealLog.query.filter(MealLog.user_id == user_id, MealLog.logged_at >= start)
    if end is not None:
        query = query.filter(MealLog.logged_at < end)
    order = desc(MealLog.logged_at) if newest_first else MealLog.logged_at
    return query.order_by(order).all()


def list_meal_logs(user_id: UUID, start: Optional[date] = None, end: Optional[date] = None) -> List[Dict[str, Any]]:
    """
    List meal logs for a user within an inclusive date range.

    Args:
        user_id: User ID
        start: First day (defaults to today)
        end: Last day, inclusive (defaults to today)

    Returns:
        List of meal log dictionaries, newest first
    """
    window_start, window_end = range_bounds(start, end)
    return [serialize_meal_log(m) for m in meals_between(user_id, window_start, window_end)]


def create_meal_log(
    user_id: UUID,
    food_id: UUID,
    servings: float,
    category: str,
    logged_at: Optional[datetime] = None
) -> Dict[str, Any]:
    """
    Create a meal log entry for a catalog food.

    Raises:
        NotFoundError: If the food item does not exist
    """
    food = get_food(food_id)
    if not food:
        raise NotFoundError("FOOD_NOT_FOUND", "food_id does not exist")

    meal = MealLog(
        user_id=user_id,
        food_id=food.id,
        servings=servings,
        category=category,
        logged_at=to_utc_naive(logged_at) if logged_at else utc_now(),
    )
    db.session.add(meal)
    db.session.commit()

    logger.info("User %s logged %s x%s (%s)", user_id, food.name, servings, category)
    return serialize_meal_log(meal)


def delete_meal_log(user_id: UUID, meal_id: UUID) -> bool:
    meal = MealLog.query.filter_by(id=meal_id, user_id=user_id).first()
    if not meal:
        return False

    db.session.delete(meal)
    db.session.commit()
    logger.info("User %s deleted meal log %s", user_id, meal_id)
    return True
