"""
AWS Lambda entrypoint for the closest kitchen handler
"""

import asyncio
import logging

from kitchenfinder.config.settings import Settings

from .responses import build_response
from .service import handle_event

logger = logging.getLogger(__name__)


def handler(event, context):
    """
    Lambda proxy entrypoint

    Loads settings from the environment, runs the async handler to
    completion and returns the response envelope.
    """
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        settings = Settings.from_env()
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return build_response(500, "Service is not configured")

    logging.getLogger().setLevel(settings.log_level)
    return asyncio.run(handle_event(event, settings))
