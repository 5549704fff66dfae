"""
Main entrypoint: serve the Lyra Pulse baseline API with uvicorn.

Scoring policy and bind address come from LYRA_* environment variables (or .env);
invalid configuration stops the process before the server starts.

Env: LYRA_API_HOST, LYRA_API_PORT, LOG_LEVEL, LYRA_ANCHOR_WEIGHT, LYRA_TREND_THRESHOLD, etc.

Equivalent: uvicorn lyra_pulse.api_server.app:app --host 127.0.0.1 --port 8000
"""

import os
import sys

# Configure structured JSON logging before other imports that may log
from lyra_pulse.pulse_logging import get_logger

logger = get_logger("main")


def main() -> None:
    """Validate settings, then run the FastAPI server in the main thread."""
    from lyra_pulse.config import get_settings
    from lyra_pulse.core.exceptions import InvalidConfiguration

    try:
        settings = get_settings()
    except InvalidConfiguration as e:
        logger.error("main_config_error", message=e.message, **e.details)
        sys.exit(1)

    from lyra_pulse.api_server.app import app
    import uvicorn

    logger.info(
        "main_server_starting",
        host=settings.api_host,
        port=settings.api_port,
        scoring=settings.scoring.to_dict(),
    )
    uvicorn.run(app, host=settings.api_host, port=settings.api_port, log_level=os.getenv("LOG_LEVEL", "info").lower())


if __name__ == "__main__":
    main()
