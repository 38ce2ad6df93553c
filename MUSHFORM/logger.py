"""Logger configuration module."""

import logging

from MUSHFORM.params import LOG_LEVEL


def setup_logger(level: str = LOG_LEVEL) -> logging.Logger:
    """Set up and configure the package logger.

    Args:
        level (str): Logging level name, e.g. "INFO" or "DEBUG".

    Returns:
        logging.Logger: Configured logger instance.
    """
    _logger = logging.getLogger("MUSHFORM")
    _logger.setLevel(level.upper())

    if _logger.handlers:
        return _logger

    formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    _logger.addHandler(console_handler)

    # Streamlit installs its own root handlers
    _logger.propagate = False

    return _logger


logger = setup_logger()
