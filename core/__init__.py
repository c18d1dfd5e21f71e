"""
Core Module - Foundation components for Sentibot
================================================

This module provides the foundational components including:
- Configuration management
- Logging setup
- Exception handling
"""

from .config import Config, load_config, save_config
from .exceptions import (
    ChatbotError,
    ConfigError,
    ResponseTableError,
    UIError,
)
from .logging import setup_logging, get_logger

__all__ = [
    "Config",
    "load_config",
    "save_config",
    "ChatbotError",
    "ConfigError",
    "ResponseTableError",
    "UIError",
    "setup_logging",
    "get_logger",
]
