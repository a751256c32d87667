import os

from flask import Flask, current_app, send_from_directory

from .config import config_by_name
from .extensions import cors, db, jwt, limiter, migrate
from .logging_setup import configure_logging
from .api import api_bp
from .middleware.security_headers import security_headers_middleware
from .middleware.session import CSRF_HEADER, session_middleware
from .errors import register_error_handlers
from .cli import register_cli
from . import models  # noqa: F401  (registers every table on db.metadata)


def create_app(config_name: str | type | None = None) -> Flask:
    """Build the app from a config name in ``config_by_name`` or a config class."""
    config_name = config_name or os.getenv("APP_ENV", "development")
    config = config_by_name[config_name] if isinstance(config_name, str) else config_name

    app = Flask(__name__)
    app.config.from_object(config)
    # Archive years and facets are emitted in query order.
    app.json.sort_keys = False

    configure_logging(app)

    # -------------------------------------------------
    # Extensions
    # -------------------------------------------------
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)
    limiter.init_app(app)
    cors.init_app(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
        allow_headers=["Content-Type", CSRF_HEADER, "X-Requested-With"],
        expose_headers=[CSRF_HEADER],
    )

    # -------------------------------------------------
    # Middleware
    # -------------------------------------------------
    session_middleware(app)
    security_headers_middleware(app)

    # -------------------------------------------------
    # API Blueprint
    # -------------------------------------------------
    app.register_blueprint(api_bp, url_prefix="/api")

    # Registered after jwt.init_app so these handlers replace the extension's defaults.
    register_error_handlers(app)
    register_cli(app)

    # -------------------------------------------------
    # Uploaded media (PUBLIC)
    # -------------------------------------------------
    @app.route("/uploads/<path:filename>", methods=["GET"], endpoint="uploaded_file")
    def serve_upload(filename):
        return send_from_directory(current_app.config["UPLOAD_FOLDER"], filename)

    app.logger.info("Application created with %s", config.__name__)
    return app
