from flask import request, current_app
from fittrack.extensions import db
from fittrack.services.constants import DEFAULT_RECOMMENDATION_HISTORY
from fittrack.services.recommendation_service import (
    get_latest_recommendation,
    generate_recommendation,
    list_recommendations,
    serialize_recommendation,
)
from fittrack.utils.http import ok, error, arg_int


def latest_recommendation_handler():
    rec = get_latest_recommendation(request.user_id)
    return ok({"recommendation": serialize_recommendation(rec) if rec else None})


def recommendation_history_handler():
    limit = arg_int("limit", DEFAULT_RECOMMENDATION_HISTORY, min_value=1, max_value=100)
    return ok({"items": list_recommendations(request.user_id, limit)})


def generate_recommendation_handler():
    try:
        rec = generate_recommendation(request.user_id)
        return ok({"recommendation": serialize_recommendation(rec)}, 201)
    except Exception as e:
        db.session.rollback()
        current_app.logger.exception("Error generating recommendation")
        return error("UNKNOWN_ERROR", str(e), 500)
