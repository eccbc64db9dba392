from flask import request, current_app
from fittrack.extensions import db
from fittrack.models.user import User
from fittrack.schemas.auth_schema import LoginSchema, RegisterSchema
from fittrack.services.profile_service import create_default_profile
from fittrack.utils.auth import create_token, check_password_hash, hash_password
from fittrack.utils.http import ok, error, json_body, validate_schema


def _user_payload(user: User):
    return {"id": str(user.id), "email": user.email}


def login_handler():
    data, errors = validate_schema(LoginSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "email and password required", 400, details=errors)

    user = User.query.filter_by(email=data["email"]).first()
    if not user or not check_password_hash(user.password, data["password"]):
        return error("INVALID_CREDENTIALS", "Email or password incorrect", 401)

    return ok({"token": create_token(user.id), "user": _user_payload(user)})


def register_handler():
    """
    Create an account together with its default profile.

    Body Parameters:
        - email (required)
        - password (required): at least 6 characters
        - name (optional): profile display name
    """
    data, errors = validate_schema(RegisterSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid registration data", 400, details=errors)

    if User.query.filter_by(email=data["email"]).first():
        return error("EMAIL_IN_USE", "email already registered", 409)

    try:
        user = User(email=data["email"], password=hash_password(data["password"]))
        db.session.add(user)
        db.session.flush()
        create_default_profile(user, name=data["name"].strip())
        db.session.commit()
        current_app.logger.info("Registered user %s", user.id)
        return ok({"token": create_token(user.id), "user": _user_payload(user)}, 201)
    except Exception as e:
        db.session.rollback()
        current_app.logger.exception("Error registering user")
        return error("UNKNOWN_ERROR", str(e), 500)


def logout_handler():
    """
    Tokens are stateless; the client drops its copy. This endpoint only confirms.
    """
    return ok({"message": "Logged out successfully"})


def me_handler():
    user = db.session.get(User, request.user_id)
    if not user:
        return error("NOT_FOUND", "User not found", 404)
    return ok(_user_payload(user))
