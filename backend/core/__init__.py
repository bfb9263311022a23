"""
SDI Designer Core Module
========================
Shared configuration and logging infrastructure.
"""

from .config import settings, Settings
from .logger import logger, setup_logger, get_logger

__all__ = ["settings", "Settings", "logger", "setup_logger", "get_logger"]
