"""Application factory for the form relay app."""

from __future__ import annotations

from typing import Optional

from flask import Flask
from flask_cors import CORS

from retirement_client.app.api.routes import ClientFactory, api_bp
from retirement_client.config.logging import configure_logging
from retirement_client.config.settings import ClientSettings
from retirement_client.core.client import CalculationClient


def create_app(
    settings: Optional[ClientSettings] = None,
    client_factory: Optional[ClientFactory] = None,
) -> Flask:
    """Build the Flask app instance.

    ``client_factory`` returns a fresh :class:`CalculationClient` per request;
    it defaults to one built from ``settings``.
    """
    settings = settings or ClientSettings()
    configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    app = Flask(__name__)
    app.config["CLIENT_SETTINGS"] = settings
    app.config["CALCULATION_CLIENT_FACTORY"] = client_factory or (
        lambda: CalculationClient(settings)
    )

    CORS(
        app,
        resources={r"/api/*": {"origins": settings.cors_origins}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
