"""
Process entry point: ``shortlink-server`` or ``python -m shortlink_app.server``.

Startup order:
1. Load settings (missing DYNAMODB_TABLE_NAME / DOMAIN_NAME is fatal)
2. Configure logging
3. Build the store and the application context
4. Serve with uvicorn
"""

import logging
import sys

import uvicorn
from pydantic import ValidationError as PydanticValidationError

from shortlink_app.app import create_app
from shortlink_app.config import load_settings
from shortlink_app.context import AppContext
from shortlink_app.middleware.logging import configure_logging

logger = logging.getLogger("shortlink.server")


def main() -> int:
    try:
        settings = load_settings()
    except PydanticValidationError as e:
        configure_logging("ERROR")
        missing = ", ".join(
            str(error["loc"][0]).upper() for error in e.errors() if error["type"] == "missing"
        )
        logger.critical("Invalid configuration%s: %s", f" (missing {missing})" if missing else "", e)
        return 1

    configure_logging(settings.log_level)
    context = AppContext.from_settings(settings)
    app = create_app(context)

    logger.info("Server starting on %s:%s", settings.host, settings.port)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        timeout_keep_alive=settings.idle_timeout,
        log_level=settings.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
