"""
Food Catalog Service

The catalog is shared: every authenticated user can read it and add to it.
"""

import logging
from typing import Any, Dict, Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError

from fittrack.extensions import db
from fittrack.models.food_item import FoodItem
from fittrack.services.errors import ConflictError
from fittrack.utils.http import num

logger = logging.getLogger(__name__)


def serialize_food(food: FoodItem) -> Dict[str, Any]:
    return {
        "id": str(food.id),
        "name": food.name,
        "calories": num(food.calories),
        "protein": num(food.protein),
        "carbs": num(food.carbs),
        "fats": num(food.fats),
        "barcode": food.barcode,
        "created_at": food.created_at.isoformat() if food.created_at else None,
    }


def list_foods(search: str = "", page: int = 1, limit: int = 50) -> Dict[str, Any]:
    """
    List catalog items ordered by name.

    Args:
        search: Case-insensitive substring of the food name
        page: 1-based page number
        limit: Page size
    """
    query = FoodItem.query
    if search:
        # match the term literally, not as a LIKE pattern
        term = search.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        query = query.filter(FoodItem.name.ilike(f"%{term}%", escape="\\"))

    pagination = query.order_by(FoodItem.name).paginate(page=page, per_page=limit, error_out=False)

    return {
        "items": [serialize_food(f) for f in pagination.items],
        "total": pagination.total,
        "page": page,
        "limit": limit,
        "pages": pagination.pages,
    }


def get_food(food_id: UUID) -> Optional[FoodItem]:
    return db.session.get(FoodItem, food_id)


def get_food_by_barcode(barcode: str) -> Optional[FoodItem]:
    return FoodItem.query.filter_by(barcode=barcode).first()


def create_food(data: Dict[str, Any]) -> FoodItem:
    """
    Add a food item to the shared catalog.

    Raises:
        ConflictError: When the barcode is already taken
    """
    barcode = (data.get("barcode") or "").strip() or None
    if barcode and get_food_by_barcode(barcode):
        raise ConflictError("DUPLICATE_BARCODE", "A food item with this barcode already exists")

    food = FoodItem(
        name=data["name"].strip(),
        calories=data.get("calories", 0),
        protein=data.get("protein", 0),
        carbs=data.get("carbs", 0),
        fats=data.get("fats", 0),
        barcode=barcode,
    )
    db.session.add(food)
    try:
        db.session.commit()
    except IntegrityError:
        # Lost a race against another insert with the same barcode
        db.session.rollback()
        raise ConflictError("DUPLICATE_BARCODE", "A food item with this barcode already exists")

    logger.info("Added food item %s (%s)", food.id, food.name)
    return food
