"""
Dashboard Service

Today's intake against the profile target, plus the latest weigh-in.
"""

from decimal import Decimal
from typing import Any, Dict
from uuid import UUID

from fittrack.services.constants import DEFAULT_CALORIE_TARGET
from fittrack.services.meal_log_service import meals_between
from fittrack.services.nutrition_service import round_half_up, sum_nutrition
from fittrack.services.profile_service import get_profile
from fittrack.services.weight_service import latest_weight
from fittrack.utils.dates import day_bounds, utc_today


def build_dashboard(user_id: UUID) -> Dict[str, Any]:
    profile = get_profile(user_id)
    start, end = day_bounds(utc_today())
    totals = sum_nutrition(meals_between(user_id, start, end))

    calories = round_half_up(totals["calories"])
    target = profile.daily_calorie_target if profile else DEFAULT_CALORIE_TARGET
    progress = round_half_up(Decimal(calories) * 100 / target, 1) if target else 0.0

    return {
        "profile": {
            "name": profile.name,
            "goal_type": profile.goal_type,
            "daily_calorie_target": profile.daily_calorie_target,
        } if profile else None,
        "date": start.date().isoformat(),
        "today": {
            "calories": calories,
            "protein": round_half_up(totals["protein"]),
            "carbs": round_half_up(totals["carbs"]),
            "fats": round_half_up(totals["fats"]),
        },
        "calorie_target": target,
        "calorie_progress": progress,
        "recent_weight": latest_weight(user_id),
    }
