from datetime import datetime
from uuid import uuid4

from fittrack.extensions import db

class User(db.Model):
    """Authentication identity. Every user-owned table points here."""
    __tablename__ = "users"

    id = db.Column(db.Uuid, primary_key=True, default=uuid4)
    email = db.Column(db.String(120), unique=True, nullable=False)
    password = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    profile = db.relationship("UserProfile", back_populates="user", uselist=False, cascade="all, delete-orphan")
