from flask import Blueprint
from fittrack.utils.auth import require_auth
from fittrack.controllers.dashboard_controller import get_dashboard_handler, get_progress_handler

dashboard_bp = Blueprint("dashboard", __name__, url_prefix="/api")

@dashboard_bp.get("/dashboard")
@require_auth
def dashboard():
    return get_dashboard_handler()


@dashboard_bp.get("/progress")
@require_auth
def progress():
    return get_progress_handler()
