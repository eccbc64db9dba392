from fittrack.models.user import User
from fittrack.models.profile import UserProfile
from fittrack.models.food_item import FoodItem
from fittrack.models.meal_log import MealLog
from fittrack.models.weight_log import WeightLog
from fittrack.models.measurement import Measurement
from fittrack.models.recommendation import AIRecommendation

__all__ = [
    "User",
    "UserProfile",
    "FoodItem",
    "MealLog",
    "WeightLog",
    "Measurement",
    "AIRecommendation",
]
