from flask import Flask, jsonify
from flask_cors import CORS
from dotenv import load_dotenv
from werkzeug.exceptions import HTTPException
from appointments.extension import db, migrate, jwt, ma
from appointments.routes_controller import register_routes
from appointments.service.clock import SystemClock
from appointments.service.notifications import ReservationNotifier
from appointments.tasks import init_celery
from appointments.seed import register_commands
import os
from datetime import timedelta
import logging


load_dotenv()

DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://127.0.0.1:5173"


def create_app(config=None):
    app = Flask(__name__)

    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    # JWT Configuration
    app.config["JWT_SECRET_KEY"] = os.getenv("JWT_SECRET_KEY", "fallback-secret-key-change-me-in-production")
    app.config["JWT_ACCESS_TOKEN_EXPIRES"] = timedelta(hours=24)
    app.config["JWT_TOKEN_LOCATION"] = ["headers"]
    app.config["JWT_HEADER_NAME"] = "Authorization"
    app.config["JWT_HEADER_TYPE"] = "Bearer"
    # let flask-jwt-extended errors reach their handlers through flask-restful
    app.config["PROPAGATE_EXCEPTIONS"] = True
    app.config["ERROR_404_HELP"] = False

    # Database Configuration
    app.config["SQLALCHEMY_DATABASE_URI"] = os.getenv("DATABASE_URL", "sqlite:///appointments.db")
    app.config["SQLALCHEMY_ENGINE_OPTIONS"] = {
        "pool_pre_ping": True
    }

    # Booking, notifications
    app.config["BOOKING_TIMEZONE"] = os.getenv("BOOKING_TIMEZONE", "UTC")
    app.config["CORS_ORIGINS"] = os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
    app.config["CELERY_BROKER_URL"] = os.getenv("CELERY_BROKER_URL", "redis://localhost:6379/0")
    app.config["CELERY_RESULT_BACKEND"] = os.getenv("CELERY_RESULT_BACKEND", "redis://localhost:6379/0")
    app.config["CELERY_TASK_ALWAYS_EAGER"] = os.getenv("CELERY_TASK_ALWAYS_EAGER", "false").lower() == "true"

    # FLASK_* environment variables win over the defaults above
    app.config.from_prefixed_env()
    if config:
        app.config.update(config)

    CORS(app,
         supports_credentials=True,
         origins=[origin.strip() for origin in app.config["CORS_ORIGINS"].split(",") if origin.strip()],
         methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
         allow_headers=["Content-Type", "Authorization"],
         expose_headers=["Authorization"],
         max_age=3600
    )

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)
    ma.init_app(app)
    init_celery(app)

    # Booking core collaborators, replaceable in tests
    app.extensions["clock"] = SystemClock(app.config["BOOKING_TIMEZONE"])
    app.extensions["notifier"] = ReservationNotifier()

    # Register routes
    register_routes(app)
    register_commands(app)

    @app.errorhandler(Exception)
    def handle_error(e):
        if isinstance(e, HTTPException):
            return jsonify({"message": e.description}), e.code
        app.logger.error(f"Unhandled error: {e}", exc_info=True)
        return jsonify({"message": "Internal server error"}), 500

    @app.route('/')
    def home():
        return {"message": "Welcome to the appointments API"}

    # Add JWT error handlers
    @jwt.invalid_token_loader
    def invalid_token_callback(error):
        return {
            "message": "Invalid token",
            "error": str(error)
        }, 401

    @jwt.unauthorized_loader
    def missing_token_callback(error):
        return {
            "message": "Missing authorization token",
            "error": str(error)
        }, 401

    @jwt.expired_token_loader
    def expired_token_callback(jwt_header, jwt_payload):
        return {"message": "Token has expired"}, 401

    return app
