"""Utility modules."""

from captionkit.utils.config import Settings, get_settings
from captionkit.utils.logging import log_diagnostic, setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "log_diagnostic",
    "setup_logging",
]
