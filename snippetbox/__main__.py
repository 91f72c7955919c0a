# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import sys

from snippetbox.app import create_app
from snippetbox.shared.config import load_config
from snippetbox.shared.errors import AppError
from snippetbox.shared.logging import logger


def main() -> None:
    config = load_config()
    try:
        app = create_app(config)
    except AppError as exc:
        logger.error(f"startup failed: {exc.code} {exc.to_dict()}")
        sys.exit(1)

    logger.info(f"Starting server on http://{config.host}:{config.port}")
    app.run(host=config.host, port=config.port, threaded=True)


if __name__ == "__main__":
    main()
