import datetime as dt
from functools import wraps
from uuid import UUID
from flask import request, jsonify, current_app
import jwt
from werkzeug.security import check_password_hash, generate_password_hash


def hash_password(plain: str) -> str:
    return generate_password_hash(plain)


def create_token(user_id) -> str:
    now = dt.datetime.now(dt.timezone.utc)
    ttl = current_app.config.get("TOKEN_TTL_HOURS", 12)
    payload = {
        "sub": str(user_id),
        "iat": int(now.timestamp()),
        "exp": int((now + dt.timedelta(hours=ttl)).timestamp()),
    }
    return jwt.encode(payload, current_app.config["SECRET_KEY"], algorithm="HS256")


def decode_token(token: str):
    return jwt.decode(token, current_app.config["SECRET_KEY"], algorithms=["HS256"])


def require_auth(f):
    """Reject the request unless it carries a valid bearer token; exposes ``request.user_id``."""
    @wraps(f)
    def wrapper(*args, **kwargs):
        auth_header = request.headers.get("Authorization", "")
        if not auth_header.startswith("Bearer "):
            return jsonify({"error": {"code": "UNAUTHORIZED", "message": "Missing Bearer token"}}), 401
        token = auth_header.split(" ", 1)[1]
        try:
            payload = decode_token(token)
            request.user_id = UUID(payload["sub"])  # type: ignore
        except (jwt.InvalidTokenError, KeyError, ValueError):
            return jsonify({"error": {"code": "UNAUTHORIZED", "message": "Invalid token"}}), 401
        return f(*args, **kwargs)
    return wrapper

__all__ = ["hash_password", "create_token", "decode_token", "require_auth", "check_password_hash"]
