import logging

from flask import Flask
from fittrack.extensions import db, migrate, cors
from fittrack.routes import register_routes

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def create_app(config_object="config.Config"):
    app = Flask(__name__)
    app.config.from_object(config_object)

    logging.basicConfig(level=app.config.get("LOG_LEVEL", "INFO"), format=LOG_FORMAT)
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # Initialize database
    db.init_app(app)

    # Initialize Flask-Migrate
    migrate.init_app(app, db)

    # CORS Configuration
    cors.init_app(app,
                  origins=app.config.get("CORS_ORIGINS", []),
                  supports_credentials=True,
                  allow_headers=["Content-Type", "Authorization"],
                  methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
                  expose_headers=["Content-Type", "Authorization"])

    # Make sure every model is registered on the metadata
    from fittrack import models  # noqa: F401

    register_routes(app)

    return app
