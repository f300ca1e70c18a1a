# --------------------------------------------------------------
#  __init__.py (package root)
# --------------------------------------------------------------
from typing import Any, Mapping, Optional

from flask import Flask
from flask_cors import CORS

from .config import Config
from .routes.routes import bp as main_bp
from .services.logging import configure_logging
from .services.msa import SessionStore

__all__ = ["create_app"]


def create_app(test_config: Optional[Mapping[str, Any]] = None) -> Flask:
    """Factory for the Flask WSGI application.

    Using a *factory* makes unit testing trivial (each test just calls
    ``create_app()``) and prevents module-level side effects.
    """
    import sys

    app: Flask | None = None
    try:
        # Create app first to have access to logger
        app = Flask(__name__)
        app.config.from_object(Config)
        if test_config is not None:
            app.config.from_mapping(test_config)

        # Configure logging early to capture all messages
        configure_logging(app)

        app.logger.info("[INIT] Enabling CORS...")
        CORS(app, origins=app.config["CORS_ORIGINS"])

        app.logger.info("[INIT] Creating session store...")
        app.extensions["msa_sessions"] = SessionStore(
            max_sessions=int(app.config["MAX_SESSIONS"])
        )

        app.logger.info("[INIT] Registering blueprints...")
        app.register_blueprint(main_bp)

        app.logger.info("[INIT] Flask app creation complete")
        return app
    except Exception as e:
        # If logging is not configured yet, fallback to stderr
        if app is not None and hasattr(app, "logger"):
            app.logger.error(f"[INIT ERROR] Failed to create app: {e}", exc_info=True)
        else:
            print(f"[INIT ERROR] Failed to create app: {e}", file=sys.stderr)
            import traceback

            traceback.print_exc(file=sys.stderr)
        raise
