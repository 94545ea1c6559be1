from __future__ import annotations

from flask import Flask, jsonify

from stylegate.config import StyleGateConfig


def create_app(config: StyleGateConfig | None = None) -> Flask:
    """Create and configure the Flask app."""
    app = Flask(__name__)
    config = config or StyleGateConfig()

    # Bodies are JSON around the CSS, so allow some room beyond the CSS itself.
    app.config["MAX_CONTENT_LENGTH"] = config.max_css_bytes * 2
    app.extensions["stylegate_config"] = config

    @app.errorhandler(413)
    def too_large(exc):
        return jsonify({"success": False, "error": "Request body too large"}), 413

    # Register blueprints
    from stylegate.web.routes.api import api_bp

    app.register_blueprint(api_bp, url_prefix="/api")

    return app
