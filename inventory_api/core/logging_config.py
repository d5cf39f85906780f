# File: inventory_api/core/logging_config.py

import logging

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Configure the ``inventory_api`` logger namespace.

    Uvicorn installs its own handlers for its loggers; this only adds a
    stream handler for our namespace if none exists yet.
    """
    logger = logging.getLogger("inventory_api")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.propagate = False
