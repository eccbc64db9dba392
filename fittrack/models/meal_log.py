from datetime import datetime
from uuid import uuid4

from fittrack.extensions import db

class MealLog(db.Model):
    __tablename__ = "meal_logs"
    __table_args__ = (
        db.CheckConstraint(
            "category IN ('breakfast', 'lunch', 'dinner', 'snack')",
            name="ck_meal_logs_category",
        ),
    )

    id = db.Column(db.Uuid, primary_key=True, default=uuid4)
    user_id = db.Column(db.Uuid, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    food_id = db.Column(db.Uuid, db.ForeignKey("food_items.id", ondelete="CASCADE"), nullable=False)
    servings = db.Column(db.Numeric(8, 2), nullable=False, default=1)
    category = db.Column(db.String(20), nullable=False)
    logged_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    food_item = db.relationship("FoodItem", lazy="joined")
