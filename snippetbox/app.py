# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import atexit

from flask import Flask

from snippetbox.infrastructure.container import Container
from snippetbox.interfaces.http.routes import register_routes
from snippetbox.shared.config import AppConfig, load_config
from snippetbox.shared.logging import logger, setup_logging
from snippetbox.shared.middleware.auth import configure_authentication
from snippetbox.shared.middleware.csrf import configure_csrf
from snippetbox.shared.middleware.error_handler import configure_error_handling
from snippetbox.shared.middleware.request_logger import configure_request_logging
from snippetbox.shared.middleware.security_headers import configure_security_headers

CONTAINER_KEY = "snippetbox.container"


def create_app(config: AppConfig | None = None, *, container: Container | None = None) -> Flask:
    config = config or load_config()
    container = container or Container(config)
    setup_logging(config.log_level)

    # A broken or missing template aborts start-up here, never at request time
    templates = container.templates
    container.database.init_schema()

    app = Flask(
        __name__,
        static_folder=str(config.ui.static_dir),
        static_url_path="/static",
    )
    app.config.update(
        SECRET_KEY=config.secret_key,
        SESSION_COOKIE_NAME=config.session.cookie_name,
    )
    app.session_interface = container.session_interface
    app.extensions[CONTAINER_KEY] = container

    # Interceptors, outermost first. The session is loaded when the request
    # context is pushed; after_request hooks run in reverse order.
    configure_error_handling(app)
    configure_request_logging(app, debug_mode=config.debug_logging)
    configure_security_headers(app, enable_hsts=config.security.enable_hsts)
    configure_authentication(app, container.user_repository)
    configure_csrf(app, enabled=config.security.enable_csrf)

    register_routes(app, container)

    store = container.session_store
    store.start_cleanup(config.session.cleanup_interval)
    atexit.register(store.stop_cleanup)

    logger.info(f"Flask app initialized with {len(templates.names())} page templates")
    return app
