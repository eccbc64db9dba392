"""
Weight Service

Weight history for the caller, newest first.
"""

import logging
from datetime import date
from decimal import Decimal
from typing import Any, Dict, List, Optional
from uuid import UUID

from sqlalchemy import desc

from fittrack.extensions import db
from fittrack.models.weight_log import WeightLog
from fittrack.services.nutrition_service import round_half_up
from fittrack.utils.dates import utc_today

logger = logging.getLogger(__name__)


def weight_delta(newer, older) -> Decimal:
    """Exact difference of two weights; str() keeps floats at their shortest repr."""
    return Decimal(str(newer)) - Decimal(str(older))


def serialize_weight_log(log: WeightLog) -> Dict[str, Any]:
    return {
        "id": str(log.id),
        "user_id": str(log.user_id),
        "weight": float(log.weight),
        "date": log.date.isoformat(),
        "created_at": log.created_at.isoformat() if log.created_at else None,
    }


def recent_weights(user_id: UUID, limit: int) -> List[WeightLog]:
    """Most recent weight logs by date; same-day entries fall back to insertion order."""
    return (
        WeightLog.query
        .filter_by(user_id=user_id)
        .order_by(desc(WeightLog.date), desc(WeightLog.created_at))
        .limit(limit)
        .all()
    )


def weights_since(user_id: UUID, start: date) -> List[WeightLog]:
    return (
        WeightLog.query
        .filter(WeightLog.user_id == user_id, WeightLog.date >= start)
        .order_by(WeightLog.date, WeightLog.created_at)
        .all()
    )


def latest_weight(user_id: UUID) -> Optional[float]:
    logs = recent_weights(user_id, 1)
    return float(logs[0].weight) if logs else None


def list_weight_logs(user_id: UUID, limit: int) -> Dict[str, Any]:
    """
    Weight history plus the change across the returned window.

    ``change_kg`` is newest minus oldest of the listed rows, or None with fewer than two.
    """
    logs = recent_weights(user_id, limit)
    change = None
    if len(logs) >= 2:
        change = round_half_up(weight_delta(logs[0].weight, logs[-1].weight), 2)

    return {
        "items": [serialize_weight_log(log) for log in logs],
        "change_kg": change,
    }


def create_weight_log(user_id: UUID, weight: float, on: Optional[date] = None) -> Dict[str, Any]:
    log = WeightLog(user_id=user_id, weight=weight, date=on or utc_today())
    db.session.add(log)
    db.session.commit()

    logger.info("User %s logged weight %.1f kg on %s", user_id, weight, log.date)
    return serialize_weight_log(log)


def delete_weight_log(user_id: UUID, log_id: UUID) -> bool:
    log = WeightLog.query.filter_by(id=log_id, user_id=user_id).first()
    if not log:
        return False

    db.session.delete(log)
    db.session.commit()
    logger.info("User %s deleted weight log %s", user_id, log_id)
    return True
