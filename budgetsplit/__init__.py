import time
import uuid

from flask import Flask, g, jsonify, request
from sqlalchemy import text

from .extensions import db, migrate, login_manager
from .config import Config
from .errors import AuthenticationError, register_error_handlers

from .blueprints.auth.routes import auth_bp
from .blueprints.categories.routes import categories_bp
from .blueprints.transactions.routes import transactions_bp
from .blueprints.budgets.routes import budgets_bp
from .blueprints.financial_profile.routes import financial_profile_bp
from .blueprints.insights.routes import insights_bp


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)

    @login_manager.unauthorized_handler
    def _unauthorized():
        raise AuthenticationError("Not authenticated")

    # Ensure tables exist for a smooth first run
    with app.app_context():
        db.create_all()

    register_error_handlers(app)
    _install_request_logging(app)

    # Register blueprints
    app.register_blueprint(auth_bp)
    app.register_blueprint(categories_bp)
    app.register_blueprint(transactions_bp)
    app.register_blueprint(budgets_bp)
    app.register_blueprint(financial_profile_bp)
    app.register_blueprint(insights_bp)

    @app.route("/health")
    def health():
        try:
            db.session.execute(text("SELECT 1"))
        except Exception as exc:
            db.session.rollback()
            app.logger.warning("Health check failed: %s", exc)
            return jsonify({"status": "error", "database": "unavailable"}), 503
        return jsonify({"status": "ok", "database": "ok"})

    return app


def _install_request_logging(app):
    log = app.logger

    @app.before_request
    def _start_request():
        g.request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
        g.request_started = time.perf_counter()

    @app.after_request
    def _log_request(response):
        response.headers["X-Request-ID"] = g.get("request_id", "")
        if request.path == "/health":
            return response
        elapsed_ms = (time.perf_counter() - g.get("request_started", time.perf_counter())) * 1000
        log.info(
            "%s %s -> %s (%.1f ms) request_id=%s",
            request.method, request.path, response.status_code, elapsed_ms, g.get("request_id"),
        )
        return response
