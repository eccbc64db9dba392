from flask import jsonify, current_app
from sqlalchemy.exc import SQLAlchemyError
from fittrack.extensions import db
from fittrack.utils.dates import utc_now

def home_index():
    return jsonify({
        "message": "FitTrack API is running",
    })

def health_check():
    db_status = "healthy"
    try:
        # Ping the database
        db.session.execute(db.text('SELECT 1'))
    except SQLAlchemyError as e:
        current_app.logger.error("Database health check failed: %s", e)
        db_status = f"unhealthy: {str(e)}"

    return jsonify({
        "status": "online",
        "database": db_status,
        "server_time": utc_now().isoformat(),
    }), 200 if db_status == "healthy" else 503
