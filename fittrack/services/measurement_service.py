import logging
from typing import Any, Dict, List
from uuid import UUID

from sqlalchemy import desc

from fittrack.extensions import db
from fittrack.models.measurement import Measurement, MEASUREMENT_FIELDS
from fittrack.utils.dates import utc_today
from fittrack.utils.http import num

logger = logging.getLogger(__name__)


def serialize_measurement(m: Measurement) -> Dict[str, Any]:
    payload = {
        "id": str(m.id),
        "user_id": str(m.user_id),
        "date": m.date.isoformat(),
        "created_at": m.created_at.isoformat() if m.created_at else None,
    }
    for field in MEASUREMENT_FIELDS:
        payload[field] = num(getattr(m, field))
    return payload


def list_measurements(user_id: UUID, limit: int) -> List[Dict[str, Any]]:
    rows = (
        Measurement.query
        .filter_by(user_id=user_id)
        .order_by(desc(Measurement.date), desc(Measurement.created_at))
        .limit(limit)
        .all()
    )
    return [serialize_measurement(m) for m in rows]


def create_measurement(user_id: UUID, data: Dict[str, Any]) -> Dict[str, Any]:
    m = Measurement(user_id=user_id, date=data.get("date") or utc_today())
    for field in MEASUREMENT_FIELDS:
        setattr(m, field, data.get(field))
    db.session.add(m)
    db.session.commit()

    logger.info("User %s logged measurements on %s", user_id, m.date)
    return serialize_measurement(m)


def delete_measurement(user_id: UUID, measurement_id: UUID) -> bool:
    m = Measurement.query.filter_by(id=measurement_id, user_id=user_id).first()
    if not m:
        return False

    db.session.delete(m)
    db.session.commit()
    logger.info("User %s deleted measurement %s", user_id, measurement_id)
    return True
