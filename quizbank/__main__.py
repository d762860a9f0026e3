"""Run the quizbank server: ``python -m quizbank``."""
from __future__ import annotations

import logging

import uvicorn

from quizbank.app import create_app
from quizbank.core.config import get_settings
from quizbank.core.log import configure_logging

logger = logging.getLogger("quizbank")


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    app = create_app(settings)
    logger.info("Server running at http://localhost:%d", settings.port)
    logger.info("Use Ctrl+C to stop the server.")
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
