from datetime import datetime

from fittrack.extensions import db
from fittrack.utils.enums import GoalType

GOAL_TYPES = tuple(g.value for g in GoalType)

class UserProfile(db.Model):
    __tablename__ = "users_profiles"
    __table_args__ = (
        db.CheckConstraint(
            "goal_type IN ('weight_loss', 'muscle_gain', 'maintenance')",
            name="ck_users_profiles_goal_type",
        ),
    )

    id = db.Column(db.Uuid, db.ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    name = db.Column(db.Text, nullable=False, default="")
    goal_type = db.Column(db.String(20), nullable=False, default=GoalType.MAINTENANCE.value)
    daily_calorie_target = db.Column(db.Integer, nullable=False, default=2000)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = db.relationship("User", back_populates="profile")
