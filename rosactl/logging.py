"""Logging configuration for the rosactl package."""
import logging

from rosactl.config import Config


def setup_logging(debug_mode: bool = False) -> None:
    """Configure logging based on debug mode."""
    log_level = logging.DEBUG if debug_mode else Config.LOG_LEVEL
    logging.basicConfig(
        level=log_level,
        format=Config.LOG_FORMAT,
        handlers=[
            logging.StreamHandler()
        ]
    )
    # Disable debug logging for noisy libraries
    if not debug_mode:
        logging.getLogger('urllib3').setLevel(logging.WARNING)
    else:
        logging.getLogger().setLevel(logging.DEBUG)
