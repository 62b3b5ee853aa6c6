"""Utilities package."""

from .config import settings
from .log import LoggerMixin, configure_logging, get_logger, mask_card_number

__all__ = [
    "settings",
    "get_logger",
    "LoggerMixin",
    "configure_logging",
    "mask_card_number",
]
