from flask import Flask, jsonify
from flask_cors import CORS
from dotenv import load_dotenv
import os
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from punchcard.extensions import db
import logging

# Load environment variables
load_dotenv()


def _env_flag(name, default):
    return os.getenv(name, default).lower() in ["true", "1", "t"]


def create_app(test_config=None):
    app = Flask(__name__)

    # Set testing mode from environment variable
    app.config["TESTING"] = os.getenv("FLASK_ENV") == "testing"

    # Configure logging
    logging.basicConfig(level=logging.INFO)
    app.logger.setLevel(logging.INFO)

    # Configure database
    app.config["SQLALCHEMY_DATABASE_URI"] = os.getenv(
        "DATABASE_URL", "postgresql://localhost/punchcard"
    )
    app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = False

    # Rate limiting
    app.config["RATELIMIT_ENABLED"] = _env_flag("RATELIMIT_ENABLED", "true")
    app.config["RATELIMIT_STORAGE_URI"] = os.getenv("LIMITER_STORAGE_URL", "memory://")

    if test_config:
        app.config.update(test_config)

    Limiter(
        get_remote_address,
        app=app,
        default_limits=["150 per minute", "10000 per hour"],
        storage_uri=app.config["RATELIMIT_STORAGE_URI"],
        strategy="fixed-window",
    )

    # Initialize Flask extensions
    db.init_app(app)

    # Register blueprints
    from punchcard.routes.scan_routes import scan_bp
    from punchcard.routes.event_routes import event_bp
    from punchcard.routes.user_routes import user_bp

    app.register_blueprint(scan_bp)
    app.register_blueprint(event_bp)
    app.register_blueprint(user_bp)

    # Set up CORS
    cors_origins = os.getenv("CORS_ORIGINS", "*").split(",")
    app.logger.info(f"Initializing CORS with origins: {cors_origins}")
    CORS(app, origins=cors_origins)

    @app.route("/", methods=["GET"])
    def hello():
        return jsonify({"message": "Hello World"})

    return app
