from decimal import Decimal

from fittrack import create_app
from fittrack.extensions import db
from fittrack.models.food_item import FoodItem
from fittrack.models.user import User
from fittrack.services.profile_service import create_default_profile
from fittrack.utils.auth import hash_password

# name, calories, protein, carbs, fats, barcode
SAMPLE_FOODS = [
    ("Chicken Breast", 165, 31, 0, 3.6, "1234567890001"),
    ("Brown Rice", 216, 5, 45, 1.8, "1234567890002"),
    ("Broccoli", 55, 3.7, 11.2, 0.6, "1234567890003"),
    ("Salmon", 206, 22, 0, 13, "1234567890004"),
    ("Banana", 105, 1.3, 27, 0.4, "1234567890005"),
    ("Greek Yogurt", 100, 10, 3.6, 4, "1234567890006"),
    ("Eggs", 155, 13, 1.1, 11, "1234567890007"),
    ("Oatmeal", 158, 6, 28, 3, "1234567890008"),
    ("Almonds", 164, 6, 6, 14, "1234567890009"),
    ("Sweet Potato", 112, 2, 26, 0.1, "1234567890010"),
]


def seed_foods():
    """Insert the sample catalog; rows whose barcode already exists are skipped."""
    added = 0
    for name, cal, p, c, f, barcode in SAMPLE_FOODS:
        if FoodItem.query.filter_by(barcode=barcode).first():
            continue
        db.session.add(FoodItem(
            name=name,
            calories=Decimal(str(cal)),
            protein=Decimal(str(p)),
            carbs=Decimal(str(c)),
            fats=Decimal(str(f)),
            barcode=barcode,
        ))
        added += 1
    return added


def seed_demo_user(email="user@example.com", password="secret"):
    if User.query.filter_by(email=email).first():
        return None
    user = User(email=email, password=hash_password(password))
    db.session.add(user)
    db.session.flush()
    create_default_profile(user, name="Demo User")
    return user


if __name__ == "__main__":
    app = create_app()

    with app.app_context():
        # ensure tables exist (non-destructive: won't alter existing columns)
        db.create_all()
        added = seed_foods()
        user = seed_demo_user()
        db.session.commit()

        print(f"Seed completed: {added} food items added" + (", demo user created" if user else ""))
