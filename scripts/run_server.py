"""Run the FinReport API locally.

Usage:
    PYTHONPATH=src python scripts/run_server.py

Host, port and log level come from Settings (environment or .env).
"""

import logging

import uvicorn

from finreport.api.main import LOG_FORMAT
from finreport.config import settings

logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
logger = logging.getLogger("run_server")


def main() -> None:
    logger.info("Server running on: http://%s:%d", settings.host, settings.port)
    logger.info("API Endpoint: POST http://%s:%d/api/reports/generate", settings.host, settings.port)
    uvicorn.run(
        "finreport.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
