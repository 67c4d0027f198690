"""Logging setup for the API process."""
import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging at startup. Unknown level names fall back to INFO."""
    level_value = logging.getLevelName(level.upper())
    if not isinstance(level_value, int):
        level_value = logging.INFO
    logging.basicConfig(level=level_value, format=LOG_FORMAT)
