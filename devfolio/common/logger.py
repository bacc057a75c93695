from devfolio.common.environment_constants import LOG_LEVEL
import logging
import os

_logger_initialized = False


def _setup_logger():
    """
    Configure the root logging handler once per process.

    The level is taken from the `LOG_LEVEL` environment variable
    (case-insensitive, defaults to 'INFO'). Unknown level names fall back to INFO.
    """
    global _logger_initialized
    if _logger_initialized:
        return

    log_level = os.environ.get(LOG_LEVEL, "INFO").upper()
    level = getattr(logging, log_level, logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s - %(levelname)s - %(message)s")
    _logger_initialized = True


def get_logger(name="devfolio"):
    """
    Returns a configured logger instance.

    Args:
        name (str, optional): The name of the logger. Defaults to "devfolio".

    Returns:
        logging.Logger: A configured logger instance.
    """
    _setup_logger()
    return logging.getLogger(name)
