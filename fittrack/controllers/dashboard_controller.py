from flask import request
from fittrack.services.dashboard_service import build_dashboard
from fittrack.services.errors import ServiceError
from fittrack.services.progress_service import build_progress
from fittrack.utils.http import ok, arg_str, service_error


def get_dashboard_handler():
    return ok(build_dashboard(request.user_id))


def get_progress_handler():
    """
    Chart data for the caller.

    Query Parameters:
        - period: week | month | year (default: week)
    """
    period = (arg_str("period", "week") or "week").strip().lower()
    try:
        return ok(build_progress(request.user_id, period))
    except ServiceError as e:
        return service_error(e)
