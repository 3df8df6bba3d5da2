"""Application factory and app-wide configuration."""

import logging
from typing import Optional

from flask import Flask
from flask_cors import CORS

from backend.app.api.routes import api_bp
from backend.app.config import Settings, settings as default_settings


def create_app(config: Optional[Settings] = None) -> Flask:
    """Build the Flask app instance."""
    config = config or default_settings

    logging.basicConfig(
        level=config.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(config.LOG_LEVEL.upper())

    app = Flask(__name__)
    app.config["SERVICE_NAME"] = config.SERVICE_NAME

    CORS(
        app,
        resources={r"/api/*": {"origins": config.CORS_ORIGINS}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    logging.getLogger(__name__).info(
        "%s ready, CORS origins: %s", config.SERVICE_NAME, ", ".join(config.CORS_ORIGINS)
    )
    return app
