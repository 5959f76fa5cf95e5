import logging

import uvicorn

from pingserver.config import get_settings
from pingserver.logging import setup_logging
from pingserver.main import create_app

logger = logging.getLogger(__name__)


def main():
    try:
        settings = get_settings()
    except ValueError as exc:
        setup_logging()
        logger.error("invalid settings: %s", exc)
        raise SystemExit(2)

    setup_logging(settings.LOG_LEVEL)
    app = create_app()
    logger.info("listening on %s:%d", settings.HOST, settings.PORT)
    # bind failures are fatal: uvicorn logs them and exits non-zero
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)
