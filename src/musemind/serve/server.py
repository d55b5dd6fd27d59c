"""Launch the MuseMind API with uvicorn."""
from __future__ import annotations
import logging

import uvicorn

from musemind.common.config import get_settings
from musemind.common.logging_setup import setup_logging

LOGGER = logging.getLogger("musemind.server")

def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)
    base = f"http://localhost:{settings.port}"
    LOGGER.info("MuseMind backend server (powered by Gemini AI)")
    LOGGER.info("Server running on %s", base)
    LOGGER.info("Health check: %s/api/health", base)
    LOGGER.info("API endpoint: POST %s/api/generate-poem", base)
    uvicorn.run(
        "musemind.serve.fastapi_app:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )

if __name__ == "__main__":
    main()
