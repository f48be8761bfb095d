"""Run the relay under uvicorn on HOST:PORT (default 0.0.0.0:5000)."""
from __future__ import annotations
import logging

import uvicorn

from translation_relay.common.config import load_settings
from translation_relay.common.logging_setup import setup_logging

LOGGER = logging.getLogger("translation_relay.server")

def main() -> None:
    settings = load_settings()
    setup_logging(settings.log_level)
    LOGGER.info("Server running at http://localhost:%s", settings.port)
    uvicorn.run(
        "translation_relay.relay.app:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )

if __name__ == "__main__":
    main()
