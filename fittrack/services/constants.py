"""
Tracking Constants

Thresholds and defaults shared by the dashboard, progress and recommendation services.
"""

# Profile defaults
DEFAULT_CALORIE_TARGET = 2000

# Recommendation thresholds
LOW_INTAKE_RATIO = 0.8
HIGH_INTAKE_RATIO = 1.2
MIN_DAILY_PROTEIN_G = 50
RECOMMENDATION_LOOKBACK_DAYS = 7

# List sizes
DEFAULT_HISTORY_LIMIT = 30
DEFAULT_RECOMMENDATION_HISTORY = 10

# Progress windows
PERIOD_DAYS = {
    "week": 7,
    "month": 30,
    "year": 365,
}
