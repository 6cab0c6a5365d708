"""
project: Growth Rates
module: __init__.py
License: MIT

Flask application factory for the growth rate query service.

The registry of growth rates is built once (or passed in by the caller) and
stored on the app under ``app.extensions["growth_rates"]``; routes only read
from it. Configuration is sourced from environment variables, with an
optional ``.env`` file loaded first.
"""

import logging
import os
import uuid

from dotenv import load_dotenv
from flask import Flask, jsonify

EXTENSION_KEY = "growth_rates"


def create_app(registry=None, config=None):
    """Return a configured Flask app serving ``registry``.

    When ``registry`` is None the built-in growth rates are loaded.
    ``config`` entries override the environment-derived defaults.
    """
    load_dotenv()

    from growthrates.seed_growth_rates import build_registry

    app = Flask(__name__)
    app.config.update(
        SECRET_KEY=os.getenv("SECRET_KEY", "dev-secret-change-me"),
        # None defers to growthrates.settings.max_level() on every request
        MAXIMUM_LEVEL=None,
    )
    app.json.sort_keys = False
    if config:
        app.config.update(config)
    if app.config["MAXIMUM_LEVEL"] is not None:
        from growthrates.settings import validate_max_level

        validate_max_level(app.config["MAXIMUM_LEVEL"])

    app.extensions[EXTENSION_KEY] = registry if registry is not None else build_registry()

    from growthrates.routes.growth_api import bp_growth  # noqa: E402

    app.register_blueprint(bp_growth)

    @app.errorhandler(500)
    def internal_error(e):
        error_id = uuid.uuid4().hex[:8]
        logging.exception("Unhandled exception (id=%s)", error_id)
        return jsonify({"error": "internal", "error_id": error_id}), 500

    return app


__all__ = ["create_app", "EXTENSION_KEY"]
