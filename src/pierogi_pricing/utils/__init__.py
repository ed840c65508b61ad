"""
Utilities Module

Shared configuration and logging helpers.
"""

from .config import Config
from .logging import get_logger, setup_logging

__all__ = ["Config", "get_logger", "setup_logging"]
