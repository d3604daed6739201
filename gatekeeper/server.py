"""
Process entrypoint: configure logging and serve the app with uvicorn.

  python -m gatekeeper.server
"""

import logging
import sys

import uvicorn

from gatekeeper.core.config import get_settings


def main() -> int:
    settings = get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )
    logger = logging.getLogger(__name__)
    logger.info("Gatekeeper is running at %s:%s", settings.HOST, settings.PORT)
    uvicorn.run(
        "gatekeeper.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        reload=settings.DEBUG,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
