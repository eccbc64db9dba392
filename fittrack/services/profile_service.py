"""
Profile Service

Reads and updates the caller's own profile row.
"""

import logging
from typing import Any, Dict, Optional
from uuid import UUID

from fittrack.extensions import db
from fittrack.models.profile import UserProfile
from fittrack.models.user import User
from fittrack.services.constants import DEFAULT_CALORIE_TARGET
from fittrack.utils.dates import utc_now
from fittrack.utils.enums import GoalType

logger = logging.getLogger(__name__)

PROFILE_FIELDS = ("name", "goal_type", "daily_calorie_target")


def serialize_profile(profile: UserProfile, email: Optional[str] = None) -> Dict[str, Any]:
    return {
        "id": str(profile.id),
        "name": profile.name,
        "email": email,
        "goal_type": profile.goal_type,
        "daily_calorie_target": profile.daily_calorie_target,
        "created_at": profile.created_at.isoformat() if profile.created_at else None,
        "updated_at": profile.updated_at.isoformat() if profile.updated_at else None,
    }


def get_profile(user_id: UUID) -> Optional[UserProfile]:
    return db.session.get(UserProfile, user_id)


def create_default_profile(user: User, name: str = "") -> UserProfile:
    """Add the profile a new account starts with. The caller commits."""
    profile = UserProfile(
        id=user.id,
        name=name or "",
        goal_type=GoalType.MAINTENANCE.value,
        daily_calorie_target=DEFAULT_CALORIE_TARGET,
    )
    db.session.add(profile)
    return profile


def update_profile(user_id: UUID, changes: Dict[str, Any]) -> Optional[UserProfile]:
    """
    Apply a partial update to the caller's profile.

    Args:
        user_id: Authenticated user
        changes: Validated fields (name, goal_type, daily_calorie_target)

    Returns:
        The updated profile, or None when the user has no profile
    """
    profile = get_profile(user_id)
    if not profile:
        return None

    for field in PROFILE_FIELDS:
        if field in changes:
            setattr(profile, field, changes[field])
    profile.updated_at = utc_now()

    db.session.commit()
    logger.info("Updated profile %s (%s)", user_id, ", ".join(sorted(changes)) or "no fields")
    return profile
