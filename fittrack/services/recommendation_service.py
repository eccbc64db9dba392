"""
Recommendation Service

Handles the rule-based coaching text:
- Calorie intake vs. the profile target over the last week
- Protein check for muscle gain goals
- Weight trend between the two most recent weigh-ins
- A standing tip for the current goal
"""

import logging
from datetime import timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List, Optional, Sequence
from uuid import UUID

from sqlalchemy import desc

from fittrack.extensions import db
from fittrack.models.meal_log import MealLog
from fittrack.models.profile import UserProfile
from fittrack.models.recommendation import AIRecommendation
from fittrack.models.weight_log import WeightLog
from fittrack.services.constants import (
    LOW_INTAKE_RATIO,
    HIGH_INTAKE_RATIO,
    MIN_DAILY_PROTEIN_G,
    RECOMMENDATION_LOOKBACK_DAYS,
)
from fittrack.services.meal_log_service import meals_between
from fittrack.services.nutrition_service import round_half_up, sum_nutrition
from fittrack.services.profile_service import get_profile
from fittrack.services.weight_service import recent_weights, weight_delta
from fittrack.utils.dates import utc_now, utc_today
from fittrack.utils.enums import GoalType

logger = logging.getLogger(__name__)

PARAGRAPH_SEPARATOR = "\n\n"

NO_PROFILE_TEXT = "Complete your profile to get personalized recommendations."
NO_MEALS_TEXT = "Start logging your meals to track your calorie and macro intake."
NO_WEIGHT_TEXT = "Log your weight regularly to track progress and adjust your plan accordingly."
MUSCLE_GAIN_PROTEIN_TEXT = (
    "For muscle gain, increase your protein intake. Aim for lean meats, fish, eggs, and legumes."
)

GOAL_TIPS = {
    GoalType.WEIGHT_LOSS.value: (
        "Tip: Focus on whole foods, increase fiber intake, and stay hydrated. "
        "Aim for consistent calorie deficit."
    ),
    GoalType.MUSCLE_GAIN.value: (
        "Tip: Prioritize protein intake (1.6-2.2g per kg body weight), "
        "progressive resistance training, and adequate rest."
    ),
}
DEFAULT_TIP = (
    "Tip: Maintain balanced macros, stay active, and monitor your weight "
    "to ensure you remain at maintenance."
)


def _kg(value: Decimal) -> str:
    """One decimal place, halves rounded up."""
    return str(value.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def _calorie_advice(meals: Sequence[MealLog], profile: UserProfile) -> List[str]:
    totals = sum_nutrition(meals)
    days_logged = {m.logged_at.date() for m in meals if m.food_item is not None}
    days = max(len(days_logged), 1)

    avg_calories = totals["calories"] / days
    avg_protein = totals["protein"] / days
    target = profile.daily_calorie_target
    shown = round_half_up(avg_calories)

    advice = []
    if avg_calories < target * LOW_INTAKE_RATIO:
        advice.append(
            f"Your average daily intake ({shown} cal) is below your target ({target} cal). "
            "Consider adding nutrient-dense snacks."
        )
    elif avg_calories > target * HIGH_INTAKE_RATIO:
        advice.append(
            f"Your average daily intake ({shown} cal) exceeds your target ({target} cal). "
            "Focus on portion control and choose lower-calorie options."
        )
    else:
        advice.append(f"Great job! Your calorie intake ({shown} cal) is aligned with your target.")

    if avg_protein < MIN_DAILY_PROTEIN_G and profile.goal_type == GoalType.MUSCLE_GAIN.value:
        advice.append(MUSCLE_GAIN_PROTEIN_TEXT)

    return advice


def _weight_advice(weights: Sequence[WeightLog], goal_type: str) -> Optional[str]:
    change = weight_delta(weights[0].weight, weights[1].weight)

    if goal_type == GoalType.WEIGHT_LOSS.value and change > 0:
        return (
            f"Your weight increased by {_kg(change)} kg. "
            "Review your calorie deficit and increase physical activity."
        )
    if goal_type == GoalType.MUSCLE_GAIN.value and change < 0:
        return (
            f"Your weight decreased by {_kg(abs(change))} kg. "
            "Increase calorie intake and focus on protein-rich foods."
        )
    if goal_type == GoalType.WEIGHT_LOSS.value and change < 0:
        return f"Excellent progress! You've lost {_kg(abs(change))} kg. Keep up the good work!"
    return None


def analyze_and_recommend(
    profile: Optional[UserProfile],
    meals: Optional[Sequence[MealLog]],
    weights: Optional[Sequence[WeightLog]]
) -> str:
    """
    Build recommendation text from recent activity.

    Args:
        profile: The user's profile, or None if it does not exist
        meals: Meal logs from the lookback window with food items loaded
        weights: Weight logs, newest first (only the first two are used)

    Returns:
        Paragraphs separated by a blank line
    """
    if not profile:
        return NO_PROFILE_TEXT

    paragraphs: List[str] = []

    if not meals:
        paragraphs.append(NO_MEALS_TEXT)
    else:
        paragraphs.extend(_calorie_advice(meals, profile))

    if weights and len(weights) >= 2:
        weight_text = _weight_advice(weights, profile.goal_type)
        if weight_text:
            paragraphs.append(weight_text)
    else:
        paragraphs.append(NO_WEIGHT_TEXT)

    paragraphs.append(GOAL_TIPS.get(profile.goal_type, DEFAULT_TIP))

    return PARAGRAPH_SEPARATOR.join(paragraphs)


def serialize_recommendation(rec: AIRecommendation) -> Dict[str, Any]:
    return {
        "id": str(rec.id),
        "user_id": str(rec.user_id),
        "recommendation_text": rec.recommendation_text,
        "date": rec.date.isoformat(),
        "created_at": rec.created_at.isoformat() if rec.created_at else None,
    }


def _newest_first(user_id: UUID):
    return (
        AIRecommendation.query
        .filter_by(user_id=user_id)
        .order_by(desc(AIRecommendation.date), desc(AIRecommendation.created_at))
    )


def get_latest_recommendation(user_id: UUID) -> Optional[AIRecommendation]:
    return _newest_first(user_id).first()


def list_recommendations(user_id: UUID, limit: int) -> List[Dict[str, Any]]:
    return [serialize_recommendation(r) for r in _newest_first(user_id).limit(limit).all()]


def generate_recommendation(user_id: UUID) -> AIRecommendation:
    """
    Evaluate the rules against the last week of data and store the result.

    Returns:
        The newly inserted recommendation, dated today
    """
    profile = get_profile(user_id)
    since = utc_now() - timedelta(days=RECOMMENDATION_LOOKBACK_DAYS)
    meals = meals_between(user_id, since)
    weights = recent_weights(user_id, 2)

    text = analyze_and_recommend(profile, meals, weights)

    rec = AIRecommendation(user_id=user_id, recommendation_text=text, date=utc_today())
    db.session.add(rec)
    db.session.commit()

    logger.info(
        "Generated recommendation %s for user %s from %d meals and %d weigh-ins",
        rec.id, user_id, len(meals), len(weights)
    )
    return rec
