"""
Terminal UI Module - Textual-based TUI
======================================

This module provides a terminal chat interface using Textual.
"""

from .app import ChatApp, run_tui

__all__ = [
    "ChatApp",
    "run_tui",
]
