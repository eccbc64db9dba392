from datetime import datetime
from uuid import uuid4

from fittrack.extensions import db
from fittrack.utils.dates import utc_today

# Body circumferences in cm, all optional
MEASUREMENT_FIELDS = ("waist", "chest", "arms", "hips", "thighs")

class Measurement(db.Model):
    __tablename__ = "measurements"

    id = db.Column(db.Uuid, primary_key=True, default=uuid4)
    user_id = db.Column(db.Uuid, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    date = db.Column(db.Date, nullable=False, default=utc_today, index=True)
    waist = db.Column(db.Numeric(6, 2))
    chest = db.Column(db.Numeric(6, 2))
    arms = db.Column(db.Numeric(6, 2))
    hips = db.Column(db.Numeric(6, 2))
    thighs = db.Column(db.Numeric(6, 2))
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
