from __future__ import annotations

from flask import Flask

from cssgradient.config import GradientConfig


def create_app(
    gradient_config: GradientConfig | None = None,
    config: dict | None = None,
) -> Flask:
    """Create and configure the Flask app."""
    app = Flask(__name__)
    app.config.update(config or {})

    # Store the gradient config on app for access in routes
    app.extensions["gradient_config"] = gradient_config or GradientConfig()

    # Register blueprints
    from cssgradient.web.routes.api import api_bp

    app.register_blueprint(api_bp, url_prefix="/api")

    return app
