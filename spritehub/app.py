# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask, Response
from flask_cors import CORS

from spritehub.infrastructure.container import Container
from spritehub.shared.config import AppConfig, load_config
from spritehub.shared.logging import logger, setup_logging
from spritehub.shared.middleware.error_handler import configure_error_handling
from spritehub.shared.middleware.request_logger import configure_request_logging


def _add_security_headers(resp: Response) -> Response:
    resp.headers.setdefault("X-Frame-Options", "DENY")
    resp.headers.setdefault("Referrer-Policy", "no-referrer")
    resp.headers.setdefault("X-Content-Type-Options", "nosniff")
    resp.headers.setdefault("Cross-Origin-Opener-Policy", "same-origin")
    resp.headers.setdefault("X-Permitted-Cross-Domain-Policies", "none")
    return resp


def create_app(
    config: AppConfig | None = None, container: Container | None = None
) -> Flask:
    # a missing JWT_SECRET fails here, before any request is served
    config = config or (container.config if container else load_config())
    container = container or Container(config)

    setup_logging(debug_mode=config.debug_logging, log_file=config.log_file)
    container.database.init_schema()

    app = Flask(__name__)
    app.extensions["spritehub.container"] = container
    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)

    CORS(
        app,
        resources={
            r"/auth/*": {"origins": config.security.allowed_origins},
            r"/pokemon.*": {"origins": config.security.allowed_origins},
        },
        allow_headers=["Authorization", "Content-Type", "X-Request-ID"],
        expose_headers=["X-Request-ID"],
    )

    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.sprites_controller.as_blueprint())
    app.after_request(_add_security_headers)

    logger.info(f"Flask app initialized env={config.app_env}")
    return app


__all__ = ["create_app"]
