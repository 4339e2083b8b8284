import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(level: int = logging.INFO):
    """Configure the root logger for the application."""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Console handler, installed only once
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)


# Configure on import
setup_logger()
