# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import os

from flask import Flask
from flask_cors import CORS

from rentcar.infrastructure.container import Container, container
from rentcar.shared.config import load_config
from rentcar.shared.logging import logger, setup_logging
from rentcar.shared.middleware.error_handler import configure_error_handling
from rentcar.shared.middleware.request_logger import configure_request_logging


def create_app(app_container: Container | None = None) -> Flask:
    if app_container is None:
        app_container = container
    config = app_container.config
    setup_logging(debug_mode=config.debug_logging, log_file=config.log_file)

    # Build the signer eagerly so a bad TOKEN_SECRET stops startup.
    app_container.session_token_issuer

    app_container.database.create_schema()

    app = Flask(__name__)
    configure_error_handling(app, verbose=config.debug_logging)
    configure_request_logging(app, verbose=config.debug_logging)

    CORS(
        app,
        resources={r"/api/*": {"origins": config.security.allowed_origins}},
        allow_headers=["Authorization", "Content-Type", "X-Request-ID"],
    )
    app.register_blueprint(app_container.misc_controller.as_blueprint())
    app.register_blueprint(app_container.users_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Cache-Control", "no-store")
        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security", "max-age=31536000; includeSubDomains"
            )
        return resp

    logger.info(f"Flask app initialized env={config.app_env}")
    return app


if __name__ == "__main__":
    debug = not load_config().is_production()
    create_app().run(
        host=os.environ.get("RENTCAR_HOST", "0.0.0.0"),
        port=int(os.environ.get("RENTCAR_PORT", "5000")),
        debug=debug,
    )
