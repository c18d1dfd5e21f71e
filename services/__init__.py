"""
Services Module - Core services for Sentibot
============================================

This module provides the main services:
- Dialogue Selector: reply choice and bounded input history
- Chatbot: the per-turn pipeline
"""

from .dialogue import DialogueSelector, ConversationHistory, FALLBACK_RESPONSE
from .chatbot import Chatbot, ChatResult

__all__ = [
    "DialogueSelector",
    "ConversationHistory",
    "FALLBACK_RESPONSE",
    "Chatbot",
    "ChatResult",
]
