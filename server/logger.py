# server/logger.py

import logging
import sys


LOGGER_NAME = "bearer_auth"

logger = logging.getLogger(LOGGER_NAME)
logger.setLevel(logging.INFO)

# Keep our records out of the root logger (uvicorn configures its own).
logger.propagate = False

# Re-imports must not stack handlers.
if not logger.handlers:
    handler = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """
    Returns a child of the service logger, e.g. get_logger("api.auth") -> "bearer_auth.api.auth".
    """
    return logger.getChild(name)


def set_level(level: str):
    logger.setLevel(level.upper())
