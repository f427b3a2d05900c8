"""
App factory: create_app()

- Loads config (env + override dict)
- Sets up logging
- Wires DI container (flag store, flag service, assignment evaluator)
- Registers middleware (request IDs, timing)
- Registers blueprints from routes/*
- Installs global error handlers
"""

from __future__ import annotations
from typing import Any, Dict, Optional

from flask import Flask, jsonify

from app.config import APP_NAME, APP_VERSION, Settings, load_settings
from app.logging_setup import configure_logging
from app.container import Container
from app import middleware
from service.errors import FlagServiceError
from store.flag_store import FlagStore


def _register_blueprints(app: Flask) -> None:
    # Lazy imports to avoid circulars
    from routes.health_routes import bp as health_bp
    from routes.flags_routes import bp as flags_bp
    from routes.assignment_routes import bp as assignment_bp
    from routes.docs_routes import bp as docs_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(flags_bp)
    app.register_blueprint(assignment_bp)
    app.register_blueprint(docs_bp)


def _install_error_handlers(app: Flask) -> None:
    @app.errorhandler(FlagServiceError)
    def flag_error(err: FlagServiceError):
        if err.status >= 500:
            app.logger.error(f"{err.status}: {err.message}")
        return jsonify(err.to_dict()), err.status

    @app.errorhandler(400)
    def bad_request(err):
        app.logger.warning(f"400: {err}")
        return jsonify({"error": "bad_request"}), 400

    @app.errorhandler(404)
    def not_found(err):
        return jsonify({"error": "not_found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(err):
        return jsonify({"error": "method_not_allowed"}), 405

    @app.errorhandler(500)
    def server_error(err):
        app.logger.exception("Unhandled server error")
        return jsonify({"error": "server_error"}), 500


def create_app(
    config_override: Dict[str, Any] | None = None,
    store: Optional[FlagStore] = None,
) -> Flask:
    # Settings & logging
    settings: Settings = load_settings(config_override)
    configure_logging(settings)

    app = Flask(__name__, static_folder=None)
    app.config["SETTINGS"] = settings
    app.json.sort_keys = False  # type: ignore[attr-defined]

    # Dependency container (store, services)
    container = Container(settings, store=store)
    app.container = container  # type: ignore[attr-defined]

    # Middleware
    middleware.install_request_id(app)
    middleware.install_timing(app)

    # Blueprints
    _register_blueprints(app)

    # Error handlers
    _install_error_handlers(app)

    app.logger.info(
        f"{APP_NAME} {APP_VERSION} started ENV={settings.ENV} FLAGS={len(container.store)}"
    )
    return app
