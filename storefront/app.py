# storefront/app.py
import logging
import os

# Show INFO logs even outside the werkzeug access log
logging.basicConfig(level=logging.INFO)

from flask import Flask, jsonify  # noqa: E402
from flask_migrate import upgrade  # noqa: E402
from werkzeug.exceptions import HTTPException  # noqa: E402

from storefront.config import Config  # noqa: E402

# Extensions
from storefront.extensions import db, login_manager, bcrypt, migrate, cors  # noqa: E402

# Blueprints
from storefront.admin import admin_bp, reset_bp  # noqa: E402
from storefront.auth import auth_bp  # noqa: E402
from storefront.api.routes.product_routes import api_products  # noqa: E402
from storefront.api.routes.category_routes import api_categories  # noqa: E402
from storefront.api.routes.order_routes import order_bp  # noqa: E402
from storefront.cli import ensure_admin, register_cli  # noqa: E402
from storefront import models as _models  # noqa: E402,F401
from storefront.auth import loaders as _loaders  # noqa: E402,F401

MIGRATIONS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "migrations")


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(HTTPException)
    def _http_error(e: HTTPException):
        return jsonify({"error": e.description or e.name}), e.code

    @app.errorhandler(Exception)
    def _unhandled(e: Exception):
        db.session.rollback()
        app.logger.exception("Unhandled %s", type(e).__name__)
        return jsonify({"error": "Internal server error"}), 500


def create_app(config_overrides: dict | None = None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)

    if not app.config.get("SQLALCHEMY_DATABASE_URI"):
        app.logger.critical("DATABASE_URL is not set; refusing to start without a database.")
        raise RuntimeError("DATABASE_URL is not set")

    # UTF-8 JSON (Cyrillic catalog names stay readable)
    app.json.ensure_ascii = False

    # Init extensions
    db.init_app(app)
    migrate.init_app(app, db, directory=MIGRATIONS_DIR)
    login_manager.init_app(app)
    bcrypt.init_app(app)
    cors.init_app(
        app,
        resources={r"/*": {"origins": app.config.get("CORS_ORIGINS") or "*"}},
    )

    # Register blueprints
    app.register_blueprint(api_products)
    app.register_blueprint(api_categories)
    app.register_blueprint(order_bp)
    app.register_blueprint(admin_bp)
    app.register_blueprint(reset_bp)
    app.register_blueprint(auth_bp)

    _register_error_handlers(app)
    register_cli(app)

    @app.get("/")
    def index():
        return jsonify({"message": "Storefront backend is running"}), 200

    with app.app_context():
        if app.config.get("AUTO_MIGRATE"):
            # same path as `flask db upgrade`, which then finds nothing to do
            upgrade()
        elif app.config.get("AUTO_CREATE_TABLES"):
            db.create_all()

        username = app.config.get("ADMIN_USERNAME")
        password = app.config.get("ADMIN_PASSWORD")
        if username and password:
            _, created = ensure_admin(username, password)
            if created:
                app.logger.info("Admin user %r created from environment", username)

    return app


if __name__ == "__main__":
    application = create_app()
    application.run(host="0.0.0.0", port=application.config["PORT"])
