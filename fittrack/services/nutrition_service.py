"""
Nutrition Service

Aggregates logged meals into calorie and macro totals.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, List

from fittrack.models.meal_log import MealLog

MACRO_KEYS = ("calories", "protein", "carbs", "fats")


def round_half_up(value: float, places: int = 0) -> float:
    """Round like a calculator: halves go away from zero for positive values."""
    exp = Decimal(1).scaleb(-places)
    rounded = Decimal(value).quantize(exp, rounding=ROUND_HALF_UP)
    return int(rounded) if places == 0 else float(rounded)


def meal_nutrition(meal: MealLog) -> Dict[str, float]:
    """
    Nutrition for one meal log entry.

    Args:
        meal: Meal log with its food item loaded

    Returns:
        Dictionary with calories, protein, carbs, fats scaled by servings
    """
    food = meal.food_item
    if food is None:
        return {key: 0.0 for key in MACRO_KEYS}
    servings = float(meal.servings)
    return {key: float(getattr(food, key)) * servings for key in MACRO_KEYS}


def sum_nutrition(meals: Iterable[MealLog]) -> Dict[str, float]:
    total = {key: 0.0 for key in MACRO_KEYS}
    for meal in meals:
        if meal.food_item is None:
            continue
        nutrition = meal_nutrition(meal)
        for key in MACRO_KEYS:
            total[key] += nutrition[key]
    return total


def daily_calories(meals: Iterable[MealLog]) -> List[Dict[str, object]]:
    """
    Per-day calorie totals keyed by the UTC date of ``logged_at``.

    Returns:
        List of {"date": "YYYY-MM-DD", "calories": int} sorted by date
    """
    calories_by_day: Dict[str, float] = {}
    for meal in meals:
        day = meal.logged_at.date().isoformat()
        calories_by_day[day] = calories_by_day.get(day, 0.0) + meal_nutrition(meal)["calories"]

    return [
        {"date": day, "calories": round_half_up(calories)}
        for day, calories in sorted(calories_by_day.items())
    ]
