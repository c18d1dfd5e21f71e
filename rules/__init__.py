"""
Rules Module - Intent classification and canned responses
=========================================================

This module provides the rule-based side of the responder:
- Prioritized keyword and sentiment-threshold rules
- The category-indexed response table
"""

from .engine import (
    Category,
    IntentClassifier,
    IntentRule,
    MatchType,
    RuleMatch,
    RulePriority,
    default_rules,
)
from .responses import ResponseTable, DEFAULT_RESPONSES

__all__ = [
    "Category",
    "IntentClassifier",
    "IntentRule",
    "MatchType",
    "RuleMatch",
    "RulePriority",
    "default_rules",
    "ResponseTable",
    "DEFAULT_RESPONSES",
]
