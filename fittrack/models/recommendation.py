from datetime import datetime
from uuid import uuid4

from fittrack.extensions import db
from fittrack.utils.dates import utc_today

class AIRecommendation(db.Model):
    __tablename__ = "ai_recommendations"

    id = db.Column(db.Uuid, primary_key=True, default=uuid4)
    user_id = db.Column(db.Uuid, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    recommendation_text = db.Column(db.Text, nullable=False)
    date = db.Column(db.Date, nullable=False, default=utc_today, index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
