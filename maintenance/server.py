"""
Start the HTTP server. Run from the project root:

  python -m maintenance.server [--host HOST] [--port PORT] [--reload]

Defaults come from HOST/PORT settings (localhost:3000).
"""

import argparse
import logging
import sys

import uvicorn
from dotenv import load_dotenv

from maintenance.core.config import ConfigError, get_settings

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main() -> int:
    load_dotenv()
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Run the maintenance master REST service.")
    parser.add_argument("--host", default=settings.HOST, help="Interface to bind")
    parser.add_argument("--port", type=int, default=settings.PORT, help="Port to listen on")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes (dev only)")
    args = parser.parse_args()

    try:
        settings.database_url()
    except ConfigError as e:
        logger.error("Cannot start: %s", e)
        return 1

    logger.info("Listening on %s:%s (env=%s)", args.host, args.port, settings.APP_ENV)
    uvicorn.run(
        "maintenance.main:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level="debug" if settings.DEBUG else "info",
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
