from datetime import datetime
from uuid import uuid4

from fittrack.extensions import db

class FoodItem(db.Model):
    __tablename__ = "food_items"

    id = db.Column(db.Uuid, primary_key=True, default=uuid4)
    name = db.Column(db.Text, nullable=False)
    calories = db.Column(db.Numeric(10, 2), nullable=False, default=0)
    protein = db.Column(db.Numeric(10, 2), nullable=False, default=0)
    carbs = db.Column(db.Numeric(10, 2), nullable=False, default=0)
    fats = db.Column(db.Numeric(10, 2), nullable=False, default=0)
    barcode = db.Column(db.Text, unique=True, index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
