from datetime import datetime
from uuid import uuid4

from fittrack.extensions import db
from fittrack.utils.dates import utc_today

class WeightLog(db.Model):
    __tablename__ = "weight_logs"

    id = db.Column(db.Uuid, primary_key=True, default=uuid4)
    user_id = db.Column(db.Uuid, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    weight = db.Column(db.Numeric(6, 2), nullable=False)  # kg
    date = db.Column(db.Date, nullable=False, default=utc_today, index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
