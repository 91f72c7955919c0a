# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import TYPE_CHECKING

from flask import Flask

from snippetbox.shared.logging import logger

if TYPE_CHECKING:
    from snippetbox.infrastructure.container import Container


def register_routes(app: Flask, container: Container) -> None:
    """Mount every dynamic route; unmatched paths and wrong methods fall through
    to the 404/405 handlers, ``/static/*`` to Flask's file server."""
    controllers = (container.snippets_controller, container.users_controller)
    for controller in controllers:
        container.templates.require(controller.PAGES)
        app.register_blueprint(controller.as_blueprint())

    logger.info(
        "routes: registered "
        + ", ".join(sorted(str(rule) for rule in app.url_map.iter_rules()))
    )


__all__ = ["register_routes"]
