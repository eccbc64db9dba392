from flask import request, current_app
from fittrack.extensions import db
from fittrack.models.user import User
from fittrack.schemas.profile_schema import ProfileUpdateSchema
from fittrack.services.profile_service import get_profile, update_profile, serialize_profile
from fittrack.utils.http import ok, error, json_body, validate_schema


def _email_for(user_id):
    user = db.session.get(User, user_id)
    return user.email if user else None


def get_profile_handler():
    profile = get_profile(request.user_id)
    if not profile:
        return error("PROFILE_NOT_FOUND", "Profile not found", 404)
    return ok(serialize_profile(profile, _email_for(request.user_id)))


def update_profile_handler():
    """
    Update the caller's profile.

    Body Parameters (all optional):
        - name: Display name
        - goal_type: weight_loss | muscle_gain | maintenance
        - daily_calorie_target: kcal per day, 1000-5000
    """
    data, errors = validate_schema(ProfileUpdateSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid profile data", 400, details=errors)

    try:
        profile = update_profile(request.user_id, data)
    except Exception as e:
        db.session.rollback()
        current_app.logger.exception("Error updating profile")
        return error("UNKNOWN_ERROR", str(e), 500)

    if not profile:
        return error("PROFILE_NOT_FOUND", "Profile not found", 404)
    return ok(serialize_profile(profile, _email_for(request.user_id)))
