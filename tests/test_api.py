import datetime as dt
import uuid

import jwt
import pytest

from fittrack import create_app
from fittrack.extensions import db
from fittrack.models.food_item import FoodItem
from fittrack.models.recommendation import AIRecommendation
from fittrack.utils.dates import utc_today
from seed import seed_foods


@pytest.fixture(scope="module")
def app():
    app = create_app("config.TestConfig")
    with app.app_context():
        db.create_all()
        seed_foods()
        db.session.commit()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


def register(client, name="Tester", password="secret"):
    email = f"user-{uuid.uuid4().hex[:10]}@example.com"
    res = client.post("/api/auth/register", json={"email": email, "password": password, "name": name})
    assert res.status_code == 201, res.get_json()
    return email, {"Authorization": f"Bearer {res.get_json()['token']}"}


def auth_headers(client, **kwargs):
    return register(client, **kwargs)[1]


def food_id(app, barcode):
    with app.app_context():
        return str(FoodItem.query.filter_by(barcode=barcode).first().id)


CHICKEN = "1234567890001"  # 165 cal, 31 g protein
BANANA = "1234567890005"   # 105 cal


# --- health -------------------------------------------------------------------

def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    data = res.get_json()
    assert data["status"] == "online"
    assert data["database"] == "healthy"


def test_home(client):
    assert client.get("/").status_code == 200


# --- auth ---------------------------------------------------------------------

def test_register_and_login(client):
    email, headers = register(client)

    res = client.post("/api/auth/login", json={"email": email.upper(), "password": "secret"})
    assert res.status_code == 200
    data = res.get_json()
    assert data["token"]
    assert data["user"]["email"] == email

    me = client.get("/api/auth/me", headers=headers)
    assert me.status_code == 200
    assert me.get_json()["email"] == email


def test_register_duplicate_email(client):
    email, _ = register(client)
    res = client.post("/api/auth/register", json={"email": email, "password": "secret"})
    assert res.status_code == 409
    assert res.get_json()["error"]["code"] == "EMAIL_IN_USE"


def test_register_validation(client):
    res = client.post("/api/auth/register", json={"email": "not-an-email", "password": "123"})
    assert res.status_code == 400
    details = res.get_json()["error"]["details"]
    assert "email" in details and "password" in details


def test_login_wrong_password(client):
    email, _ = register(client)
    res = client.post("/api/auth/login", json={"email": email, "password": "wrong-one"})
    assert res.status_code == 401
    assert res.get_json()["error"]["code"] == "INVALID_CREDENTIALS"


def test_login_missing_fields(client):
    res = client.post("/api/auth/login", json={"email": ""})
    assert res.status_code == 400


def test_protected_routes_require_token(client):
    for path in ("/api/profile", "/api/meal-logs", "/api/weight-logs", "/api/dashboard", "/api/foods"):
        assert client.get(path).status_code == 401
    res = client.get("/api/profile", headers={"Authorization": "Bearer nope"})
    assert res.status_code == 401


def test_expired_or_forged_token_rejected(client, app):
    _, headers = register(client)
    user_id = client.get("/api/auth/me", headers=headers).get_json()["id"]
    now = dt.datetime.now(dt.timezone.utc)

    expired = jwt.encode(
        {"sub": user_id, "iat": int((now - dt.timedelta(hours=13)).timestamp()),
         "exp": int((now - dt.timedelta(hours=1)).timestamp())},
        app.config["SECRET_KEY"], algorithm="HS256",
    )
    forged = jwt.encode(
        {"sub": user_id, "exp": int((now + dt.timedelta(hours=1)).timestamp())},
        "some-other-secret", algorithm="HS256",
    )
    for token in (expired, forged):
        res = client.get("/api/profile", headers={"Authorization": f"Bearer {token}"})
        assert res.status_code == 401
        assert res.get_json()["error"]["code"] == "UNAUTHORIZED"


@pytest.mark.parametrize("body", [
    {"email": 5, "password": "secret"},
    {"email": "a@example.com", "password": ["secret"]},
    {"password": "secret"},
])
def test_login_rejects_malformed_body(client, body):
    res = client.post("/api/auth/login", json=body)
    assert res.status_code == 400
    assert res.get_json()["error"]["code"] == "VALIDATION_ERROR"


def test_logout(client):
    headers = auth_headers(client)
    res = client.post("/api/auth/logout", headers=headers)
    assert res.status_code == 200


# --- profile ------------------------------------------------------------------

def test_profile_created_on_register(client):
    email, headers = register(client, name="Dana")
    res = client.get("/api/profile", headers=headers)
    assert res.status_code == 200
    data = res.get_json()
    assert data["name"] == "Dana"
    assert data["email"] == email
    assert data["goal_type"] == "maintenance"
    assert data["daily_calorie_target"] == 2000


def test_profile_update(client):
    headers = auth_headers(client)
    res = client.put("/api/profile", headers=headers, json={
        "goal_type": "muscle_gain",
        "daily_calorie_target": 2800,
        "user_id": str(uuid.uuid4()),
    })
    assert res.status_code == 200
    data = res.get_json()
    assert data["goal_type"] == "muscle_gain"
    assert data["daily_calorie_target"] == 2800
    assert data["name"] == "Tester"


@pytest.mark.parametrize("body", [
    {"goal_type": "bulk"},
    {"daily_calorie_target": 999},
    {"daily_calorie_target": 5001},
    {"name": ""},
    {"name": "   "},
])
def test_profile_update_validation(client, body):
    headers = auth_headers(client)
    res = client.put("/api/profile", headers=headers, json=body)
    assert res.status_code == 400
    assert res.get_json()["error"]["code"] == "VALIDATION_ERROR"


# --- food catalog -------------------------------------------------------------

def test_list_foods_sorted_and_searchable(client):
    headers = auth_headers(client)
    res = client.get("/api/foods", headers=headers)
    assert res.status_code == 200
    names = [f["name"] for f in res.get_json()["items"]]
    assert names == sorted(names)

    res = client.get("/api/foods?search=CHICK", headers=headers)
    items = res.get_json()["items"]
    assert [f["name"] for f in items] == ["Chicken Breast"]
    assert items[0]["calories"] == 165.0


def test_food_search_treats_wildcards_literally(client):
    headers = auth_headers(client)
    for term in ("%", "_"):
        data = client.get("/api/foods", headers=headers, query_string={"search": term}).get_json()
        assert data["items"] == []
        assert data["total"] == 0

    client.post("/api/foods", headers=headers, json={"name": "Protein Bar 100%", "calories": 200})
    items = client.get("/api/foods", headers=headers, query_string={"search": "100%"}).get_json()["items"]
    assert [f["name"] for f in items] == ["Protein Bar 100%"]


def test_food_pagination(client):
    headers = auth_headers(client)
    data = client.get("/api/foods?page=2&limit=3", headers=headers).get_json()
    assert data["page"] == 2
    assert data["limit"] == 3
    assert len(data["items"]) == 3
    assert data["total"] >= 10


def test_food_by_barcode(client):
    headers = auth_headers(client)
    res = client.get(f"/api/foods/barcode/{BANANA}", headers=headers)
    assert res.status_code == 200
    assert res.get_json()["name"] == "Banana"

    assert client.get("/api/foods/barcode/0000000000000", headers=headers).status_code == 404


def test_get_food(client, app):
    headers = auth_headers(client)
    res = client.get(f"/api/foods/{food_id(app, CHICKEN)}", headers=headers)
    assert res.status_code == 200
    assert res.get_json()["barcode"] == CHICKEN
    assert client.get(f"/api/foods/{uuid.uuid4()}", headers=headers).status_code == 404


def test_create_food_and_duplicate_barcode(client):
    headers = auth_headers(client)
    body = {"name": "Cottage Cheese", "calories": 98, "protein": 11, "carbs": 3.4, "fats": 4.3,
            "barcode": "9990000000001"}
    res = client.post("/api/foods", headers=headers, json=body)
    assert res.status_code == 201
    created = res.get_json()
    assert created["name"] == "Cottage Cheese"
    assert created["fats"] == 4.3

    res = client.post("/api/foods", headers=headers, json={**body, "name": "Other"})
    assert res.status_code == 409
    assert res.get_json()["error"]["code"] == "DUPLICATE_BARCODE"


def test_create_food_validation(client):
    headers = auth_headers(client)
    assert client.post("/api/foods", headers=headers, json={"calories": 10}).status_code == 400
    assert client.post("/api/foods", headers=headers, json={"name": "X", "calories": -1}).status_code == 400


def test_create_food_without_barcode(client):
    headers = auth_headers(client)
    res = client.post("/api/foods", headers=headers, json={"name": "Homemade Soup", "calories": 120})
    assert res.status_code == 201
    data = res.get_json()
    assert data["barcode"] is None
    assert data["protein"] == 0.0


# --- meal logs ----------------------------------------------------------------

def test_meal_log_lifecycle(client, app):
    headers = auth_headers(client)
    res = client.post("/api/meal-logs", headers=headers, json={
        "food_id": food_id(app, CHICKEN),
        "servings": 2,
        "category": "lunch",
    })
    assert res.status_code == 201
    meal = res.get_json()
    assert meal["category"] == "lunch"
    assert meal["servings"] == 2.0
    assert meal["food_item"]["name"] == "Chicken Breast"

    items = client.get("/api/meal-logs", headers=headers).get_json()["items"]
    assert [m["id"] for m in items] == [meal["id"]]

    res = client.delete(f"/api/meal-logs/{meal['id']}", headers=headers)
    assert res.status_code == 200
    assert client.get("/api/meal-logs", headers=headers).get_json()["items"] == []


def test_meal_log_date_range(client, app):
    headers = auth_headers(client)
    today = utc_today()
    earlier = today - dt.timedelta(days=3)
    client.post("/api/meal-logs", headers=headers, json={
        "food_id": food_id(app, BANANA),
        "category": "snack",
        "logged_at": f"{earlier.isoformat()}T10:00:00",
    })
    client.post("/api/meal-logs", headers=headers, json={
        "food_id": food_id(app, BANANA),
        "category": "breakfast",
    })

    today_only = client.get("/api/meal-logs", headers=headers).get_json()["items"]
    assert len(today_only) == 1

    res = client.get(f"/api/meal-logs?start={earlier.isoformat()}&end={today.isoformat()}", headers=headers)
    items = res.get_json()["items"]
    assert len(items) == 2
    # newest first
    assert items[0]["category"] == "breakfast"

    res = client.get(f"/api/meal-logs?start={earlier.isoformat()}&end={earlier.isoformat()}", headers=headers)
    assert [m["category"] for m in res.get_json()["items"]] == ["snack"]


def test_meal_log_bad_range(client):
    headers = auth_headers(client)
    assert client.get("/api/meal-logs?start=yesterday", headers=headers).status_code == 400
    assert client.get("/api/meal-logs?start=2025-03-02&end=2025-03-01", headers=headers).status_code == 400


@pytest.mark.parametrize("with_food, body", [
    (False, {"category": "lunch"}),
    (False, {"food_id": "not-a-uuid", "category": "lunch"}),
    (True, {"servings": 1, "category": "brunch"}),
    (True, {"servings": 0.05, "category": "lunch"}),
    (True, {"servings": 1}),
])
def test_meal_log_validation(client, app, with_food, body):
    headers = auth_headers(client)
    if with_food:
        body = {**body, "food_id": food_id(app, CHICKEN)}
    res = client.post("/api/meal-logs", headers=headers, json=body)
    assert res.status_code == 400


def test_meal_log_unknown_food(client):
    headers = auth_headers(client)
    res = client.post("/api/meal-logs", headers=headers, json={"food_id": str(uuid.uuid4()), "category": "dinner"})
    assert res.status_code == 404
    assert res.get_json()["error"]["code"] == "FOOD_NOT_FOUND"


def test_meal_logs_are_private(client, app):
    owner = auth_headers(client)
    other = auth_headers(client)
    meal = client.post("/api/meal-logs", headers=owner, json={
        "food_id": food_id(app, BANANA),
        "category": "snack",
    }).get_json()

    assert client.get("/api/meal-logs", headers=other).get_json()["items"] == []
    assert client.delete(f"/api/meal-logs/{meal['id']}", headers=other).status_code == 404
    assert len(client.get("/api/meal-logs", headers=owner).get_json()["items"]) == 1


def test_meal_log_ignores_client_user_id(client, app):
    owner = auth_headers(client)
    victim = auth_headers(client)
    victim_id = client.get("/api/auth/me", headers=victim).get_json()["id"]

    client.post("/api/meal-logs", headers=owner, json={
        "food_id": food_id(app, BANANA),
        "category": "snack",
        "user_id": victim_id,
    })
    assert client.get("/api/meal-logs", headers=victim).get_json()["items"] == []


# --- weight logs --------------------------------------------------------------

def test_weight_logs_and_change(client):
    headers = auth_headers(client)
    today = utc_today()
    for days_ago, weight in ((2, 81.0), (1, 80.4), (0, 80.2)):
        res = client.post("/api/weight-logs", headers=headers, json={
            "weight": weight,
            "date": (today - dt.timedelta(days=days_ago)).isoformat(),
        })
        assert res.status_code == 201

    data = client.get("/api/weight-logs", headers=headers).get_json()
    assert [w["weight"] for w in data["items"]] == [80.2, 80.4, 81.0]
    assert data["change_kg"] == -0.8


def test_weight_log_single_entry_has_no_change(client):
    headers = auth_headers(client)
    res = client.post("/api/weight-logs", headers=headers, json={"weight": 70})
    assert res.status_code == 201
    assert res.get_json()["date"] == utc_today().isoformat()

    data = client.get("/api/weight-logs", headers=headers).get_json()
    assert data["change_kg"] is None


@pytest.mark.parametrize("body", [
    {"weight": 0},
    {"weight": -5},
    {},
    {"weight": 70, "date": "2999-01-01"},
])
def test_weight_log_validation(client, body):
    headers = auth_headers(client)
    assert client.post("/api/weight-logs", headers=headers, json=body).status_code == 400


def test_weight_log_delete(client):
    owner = auth_headers(client)
    other = auth_headers(client)
    log = client.post("/api/weight-logs", headers=owner, json={"weight": 75.5}).get_json()

    assert client.delete(f"/api/weight-logs/{log['id']}", headers=other).status_code == 404
    assert client.delete(f"/api/weight-logs/{log['id']}", headers=owner).status_code == 200
    assert client.delete(f"/api/weight-logs/{log['id']}", headers=owner).status_code == 404


# --- measurements -------------------------------------------------------------

def test_measurements(client):
    headers = auth_headers(client)
    res = client.post("/api/measurements", headers=headers, json={"waist": 82.5, "hips": 95})
    assert res.status_code == 201
    created = res.get_json()
    assert created["waist"] == 82.5
    assert created["chest"] is None

    items = client.get("/api/measurements", headers=headers).get_json()["items"]
    assert [m["id"] for m in items] == [created["id"]]

    assert client.post("/api/measurements", headers=headers, json={"arms": -1}).status_code == 400

    assert client.delete(f"/api/measurements/{created['id']}", headers=headers).status_code == 200
    assert client.get("/api/measurements", headers=headers).get_json()["items"] == []


def test_measurement_date_not_in_future(client):
    headers = auth_headers(client)
    tomorrow = (utc_today() + dt.timedelta(days=1)).isoformat()
    res = client.post("/api/measurements", headers=headers, json={"date": tomorrow, "waist": 80})
    assert res.status_code == 400
    assert "date" in res.get_json()["error"]["details"]

    res = client.post("/api/measurements", headers=headers, json={"date": utc_today().isoformat(), "waist": 80})
    assert res.status_code == 201


def test_measurement_delete_is_owner_only(client):
    owner = auth_headers(client)
    other = auth_headers(client)
    created = client.post("/api/measurements", headers=owner, json={"chest": 100}).get_json()

    assert client.delete(f"/api/measurements/{created['id']}", headers=other).status_code == 404
    assert len(client.get("/api/measurements", headers=owner).get_json()["items"]) == 1


# --- dashboard & progress -----------------------------------------------------

def test_dashboard_empty(client):
    headers = auth_headers(client)
    data = client.get("/api/dashboard", headers=headers).get_json()
    assert data["today"] == {"calories": 0, "protein": 0, "carbs": 0, "fats": 0}
    assert data["calorie_target"] == 2000
    assert data["calorie_progress"] == 0.0
    assert data["recent_weight"] is None
    assert data["date"] == utc_today().isoformat()


def test_dashboard_progress_rounds_half_up(client):
    headers = auth_headers(client)
    food = client.post("/api/foods", headers=headers, json={"name": "Sugar-free Gum", "calories": 3}).get_json()
    client.post("/api/meal-logs", headers=headers, json={"food_id": food["id"], "category": "snack"})

    data = client.get("/api/dashboard", headers=headers).get_json()
    # 3 / 2000 = 0.15%
    assert data["calorie_progress"] == 0.2


def test_weight_change_rounds_half_up(client):
    headers = auth_headers(client)
    today = utc_today()
    client.post("/api/weight-logs", headers=headers, json={"weight": 80.3, "date": (today - dt.timedelta(days=1)).isoformat()})
    client.post("/api/weight-logs", headers=headers, json={"weight": 80.35, "date": today.isoformat()})

    assert client.get("/api/weight-logs", headers=headers).get_json()["change_kg"] == 0.05


def test_dashboard_totals(client, app):
    headers = auth_headers(client)
    client.post("/api/meal-logs", headers=headers, json={
        "food_id": food_id(app, CHICKEN), "servings": 0.5, "category": "lunch",
    })
    client.post("/api/meal-logs", headers=headers, json={
        "food_id": food_id(app, BANANA), "servings": 1, "category": "snack",
    })
    # logged yesterday, not part of today's totals
    client.post("/api/meal-logs", headers=headers, json={
        "food_id": food_id(app, BANANA), "category": "snack",
        "logged_at": f"{(utc_today() - dt.timedelta(days=1)).isoformat()}T12:00:00",
    })
    client.post("/api/weight-logs", headers=headers, json={"weight": 68.3})

    data = client.get("/api/dashboard", headers=headers).get_json()
    # 82.5 + 105
    assert data["today"]["calories"] == 188
    assert data["today"]["protein"] == 17
    assert data["calorie_progress"] == 9.4
    assert data["recent_weight"] == 68.3
    assert data["profile"]["goal_type"] == "maintenance"


def test_progress_week(client, app):
    headers = auth_headers(client)
    today = utc_today()
    client.post("/api/weight-logs", headers=headers, json={"weight": 80, "date": (today - dt.timedelta(days=3)).isoformat()})
    client.post("/api/weight-logs", headers=headers, json={"weight": 79, "date": today.isoformat()})
    client.post("/api/weight-logs", headers=headers, json={"weight": 85, "date": (today - dt.timedelta(days=40)).isoformat()})
    client.post("/api/meal-logs", headers=headers, json={"food_id": food_id(app, CHICKEN), "category": "lunch"})

    data = client.get("/api/progress", headers=headers).get_json()
    assert data["period"] == "week"
    assert [w["weight"] for w in data["weights"]] == [80.0, 79.0]
    assert [w["change_from_previous"] for w in data["weights"]] == [None, -1.0]
    assert data["min_weight"] == 79.0
    assert data["max_weight"] == 80.0
    assert data["daily_calories"] == [{"date": today.isoformat(), "calories": 165}]
    assert data["max_calories"] == 165

    data = client.get("/api/progress?period=month", headers=headers).get_json()
    assert len(data["weights"]) == 2
    data = client.get("/api/progress?period=year", headers=headers).get_json()
    assert len(data["weights"]) == 3


def test_progress_empty_and_invalid(client):
    headers = auth_headers(client)
    data = client.get("/api/progress?period=month", headers=headers).get_json()
    assert data["weights"] == []
    assert data["daily_calories"] == []
    assert data["max_calories"] == 0
    assert data["min_weight"] is None

    res = client.get("/api/progress?period=decade", headers=headers)
    assert res.status_code == 400
    assert res.get_json()["error"]["code"] == "INVALID_PERIOD"


# --- recommendations ----------------------------------------------------------

def test_recommendation_flow(client, app):
    headers = auth_headers(client)
    assert client.get("/api/recommendations/latest", headers=headers).get_json() == {"recommendation": None}

    client.post("/api/meal-logs", headers=headers, json={
        "food_id": food_id(app, CHICKEN), "servings": 2, "category": "dinner",
    })
    res = client.post("/api/recommendations", headers=headers)
    assert res.status_code == 201
    rec = res.get_json()["recommendation"]
    assert rec["date"] == utc_today().isoformat()
    text = rec["recommendation_text"].split("\n\n")
    assert text[0].startswith("Your average daily intake (330 cal) is below your target (2000 cal).")
    assert text[1] == "Log your weight regularly to track progress and adjust your plan accordingly."
    assert text[-1].startswith("Tip: Maintain balanced macros")

    latest = client.get("/api/recommendations/latest", headers=headers).get_json()["recommendation"]
    assert latest["id"] == rec["id"]


def test_recommendation_weight_trend(client):
    headers = auth_headers(client)
    client.put("/api/profile", headers=headers, json={"goal_type": "weight_loss"})
    today = utc_today()
    client.post("/api/weight-logs", headers=headers, json={"weight": 90, "date": (today - dt.timedelta(days=1)).isoformat()})
    client.post("/api/weight-logs", headers=headers, json={"weight": 89.2, "date": today.isoformat()})

    rec = client.post("/api/recommendations", headers=headers).get_json()["recommendation"]
    paragraphs = rec["recommendation_text"].split("\n\n")
    assert paragraphs[0] == "Start logging your meals to track your calorie and macro intake."
    assert paragraphs[1] == "Excellent progress! You've lost 0.8 kg. Keep up the good work!"
    assert paragraphs[2].startswith("Tip: Focus on whole foods")


def test_recommendation_history(client, app):
    headers = auth_headers(client)
    user_id = uuid.UUID(client.get("/api/auth/me", headers=headers).get_json()["id"])
    with app.app_context():
        older = AIRecommendation(
            user_id=user_id,
            recommendation_text="Earlier advice",
            date=utc_today() - dt.timedelta(days=2),
        )
        db.session.add(older)
        db.session.commit()
        older_id = str(older.id)

    first = client.post("/api/recommendations", headers=headers).get_json()["recommendation"]
    second = client.post("/api/recommendations", headers=headers).get_json()["recommendation"]

    items = client.get("/api/recommendations/history", headers=headers).get_json()["items"]
    # newest date first, same-day entries by creation time
    assert [i["id"] for i in items] == [second["id"], first["id"], older_id]

    items = client.get("/api/recommendations/history?limit=1", headers=headers).get_json()["items"]
    assert [i["id"] for i in items] == [second["id"]]

    other = auth_headers(client)
    assert client.get("/api/recommendations/history", headers=other).get_json()["items"] == []
