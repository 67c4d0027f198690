"""Tests for logging setup."""
import logging
from unittest.mock import patch

from core.logging import configure_logging


def test__configure_logging__uses_named_level() -> None:
    """A known level name is passed through to basicConfig."""
    with patch("core.logging.logging.basicConfig") as mock_basic_config:
        configure_logging("debug")
    assert mock_basic_config.call_args.kwargs["level"] == logging.DEBUG


def test__configure_logging__unknown_level_falls_back_to_info() -> None:
    """An unknown level name falls back to INFO."""
    with patch("core.logging.logging.basicConfig") as mock_basic_config:
        configure_logging("chatty")
    assert mock_basic_config.call_args.kwargs["level"] == logging.INFO
