from __future__ import annotations

from flask import Flask

from radtools.config import RadToolsConfig
from radtools.sync import StylesheetSync


def create_app(config: RadToolsConfig | None = None, overrides: dict | None = None) -> Flask:
    """Create and configure the Flask app."""
    app = Flask(__name__)
    app.config.update(overrides or {})

    config = config or RadToolsConfig.from_env()
    app.extensions["radtools_config"] = config
    app.extensions["stylesheet_sync"] = StylesheetSync(config.stylesheet_path)

    from radtools.web.routes.api import api_bp

    app.register_blueprint(api_bp, url_prefix="/api/devtools")

    return app
