"""
Progress Service

Weight and calorie series over a week, month or year.
"""

from datetime import datetime, time, timedelta
from typing import Any, Dict
from uuid import UUID

from fittrack.services.constants import PERIOD_DAYS
from fittrack.services.errors import ServiceError
from fittrack.services.meal_log_service import meals_between
from fittrack.services.nutrition_service import daily_calories, round_half_up
from fittrack.services.weight_service import serialize_weight_log, weight_delta, weights_since
from fittrack.utils.dates import utc_today


def build_progress(user_id: UUID, period: str) -> Dict[str, Any]:
    """
    Collect chart data for a period.

    Args:
        user_id: User ID
        period: "week", "month" or "year"

    Raises:
        ServiceError: For an unknown period
    """
    days_back = PERIOD_DAYS.get(period)
    if days_back is None:
        raise ServiceError("INVALID_PERIOD", f"period must be one of: {', '.join(PERIOD_DAYS)}")

    start_date = utc_today() - timedelta(days=days_back)
    weights = weights_since(user_id, start_date)
    calories = daily_calories(meals_between(user_id, datetime.combine(start_date, time.min), newest_first=False))

    weight_values = [float(w.weight) for w in weights]
    weight_series = []
    for i, w in enumerate(weights):
        entry = serialize_weight_log(w)
        # one decimal, compared with the previous entry in the window
        entry["change_from_previous"] = (
            round_half_up(weight_delta(w.weight, weights[i - 1].weight), 1) if i else None
        )
        weight_series.append(entry)

    return {
        "period": period,
        "start_date": start_date.isoformat(),
        "weights": weight_series,
        "daily_calories": calories,
        "max_calories": max((d["calories"] for d in calories), default=0),
        "min_weight": min(weight_values, default=None),
        "max_weight": max(weight_values, default=None),
    }
