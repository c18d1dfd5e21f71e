"""
Response Table - Canned replies indexed by category
===================================================

This module provides the category -> candidate replies table used by the
dialogue selector. Tables are validated on construction and read-only
afterwards; overrides produce a new table.
"""

from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from core.exceptions import ResponseTableError


DEFAULT_RESPONSES: Dict[str, List[str]] = {
    "greetings": [
        "Hello! How can I help you today?",
        "Hi there! What's on your mind?",
        "Hey! Nice to hear from you.",
    ],
    "farewells": [
        "Goodbye! Take care.",
        "See you later!",
        "Bye! Have a great day.",
    ],
    "positive": [
        "That's wonderful to hear!",
        "I'm glad things are going well.",
        "Great! Tell me more.",
    ],
    "negative": [
        "I'm sorry to hear that.",
        "That sounds tough. Do you want to talk about it?",
        "I hope things get better soon.",
    ],
    "default": [
        "I see. Tell me more.",
        "Interesting, go on.",
        "Can you elaborate on that?",
    ],
}


class ResponseTable:
    """
    Read-only mapping of category name to candidate replies.

    Example:
        table = ResponseTable.default().merged({"default": ["Hmm."]})
        table.get("default")  # ("Hmm.",)
    """

    def __init__(self, responses: Mapping[str, Iterable[str]]):
        """
        Build and validate a table.

        Args:
            responses: category -> replies

        Raises:
            ResponseTableError: If a category is empty or a reply is not a string
        """
        table: Dict[str, Tuple[str, ...]] = {}
        for category, replies in responses.items():
            if isinstance(replies, str):
                raise ResponseTableError(
                    "Replies must be a list of strings",
                    {"category": category}
                )
            replies = tuple(replies)
            if not replies:
                raise ResponseTableError(
                    "Category has no replies",
                    {"category": category}
                )
            for reply in replies:
                if not isinstance(reply, str):
                    raise ResponseTableError(
                        "Reply is not a string",
                        {"category": category, "reply": repr(reply)}
                    )
            table[str(category)] = replies
        self._table = MappingProxyType(table)

    @classmethod
    def default(cls) -> "ResponseTable":
        return cls(DEFAULT_RESPONSES)

    def merged(self, overrides: Optional[Mapping[str, Iterable[str]]] = None) -> "ResponseTable":
        """Return a new table with the given categories replaced or added."""
        combined: Dict[str, Iterable[str]] = dict(self._table)
        combined.update(overrides or {})
        return ResponseTable(combined)

    def get(self, category: str) -> Tuple[str, ...]:
        """Replies for a category, or an empty tuple if it is unknown."""
        return self._table.get(category, ())

    def has_category(self, category: str) -> bool:
        return category in self._table

    def missing(self, categories: Iterable[str]) -> List[str]:
        """Categories from the given list that this table cannot serve."""
        return [c for c in categories if not self.get(c)]

    @property
    def categories(self) -> List[str]:
        return list(self._table.keys())

    def __contains__(self, category: str) -> bool:
        return category in self._table

    def __len__(self) -> int:
        return len(self._table)

    def to_dict(self) -> Dict[str, List[str]]:
        """Export the table to plain lists."""
        return {category: list(replies) for category, replies in self._table.items()}
