from flask import Blueprint
from fittrack.utils.auth import require_auth
from fittrack.controllers.recommendation_controller import (
    latest_recommendation_handler,
    recommendation_history_handler,
    generate_recommendation_handler,
)

recommendation_bp = Blueprint("recommendations", __name__, url_prefix="/api/recommendations")

@recommendation_bp.get("/latest")
@require_auth
def latest_recommendation():
    return latest_recommendation_handler()


# Alias: the collection root returns the latest entry as well
@recommendation_bp.get("")
@require_auth
def recommendation_root():
    return latest_recommendation_handler()


@recommendation_bp.get("/history")
@require_auth
def recommendation_history():
    return recommendation_history_handler()


@recommendation_bp.post("")
@require_auth
def generate_recommendation():
    return generate_recommendation_handler()
