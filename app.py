import logging

import click
from flask import Flask, jsonify
from flask_cors import CORS
from flask_migrate import Migrate
from werkzeug.exceptions import HTTPException

from config import Config
from routes import health_bp, auth_bp, home_bp

from models import db
from utils.seed import init_db


def create_app(config_object=Config, **overrides):
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.config.update(overrides)

    configure_logging(app)

    # Allow the configured origins, or every origin in dev
    origins = app.config.get("CORS_ORIGIN")
    CORS(
        app,
        origins=[o.strip() for o in origins.split(",") if o.strip()] if origins else "*",
        supports_credentials=True,
    )

    # Register routes
    app.register_blueprint(health_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(home_bp)

    # Database init
    db.init_app(app)

    # Migrations
    Migrate(app, db)

    # Create tables and seed the default user at startup (safe & idempotent)
    if app.config.get("AUTO_INIT_DB", True):
        with app.app_context():
            init_db()

    register_error_handlers(app)

    @app.after_request
    def add_security_headers(resp):
        resp.headers["X-Content-Type-Options"] = "nosniff"
        resp.headers["X-Frame-Options"] = "DENY"
        resp.headers["Referrer-Policy"] = "no-referrer"
        resp.headers["Content-Security-Policy"] = "default-src 'none'; frame-ancestors 'none';"
        return resp

    register_cli(app)

    return app


def configure_logging(app):
    level = getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    app.logger.setLevel(level)


def register_error_handlers(app):
    @app.errorhandler(HTTPException)
    def handle_http_error(exc):
        return jsonify(error=exc.description or exc.name), exc.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(exc):
        app.logger.exception("Unhandled error")
        db.session.rollback()
        return jsonify(error="Server error"), 500

#-------------------------

def register_cli(app):
    @app.cli.command("init-db")
    def init_db_command():
        """Create missing tables and seed the default user."""
        init_db()
        click.echo(f"Database ready; seed user {app.config['SEED_USER_EMAIL']}")

#-------------------------


if __name__ == "__main__":
    app = create_app()
    # Run locally
    app.run(host="127.0.0.1", port=5002)
