"""
Stop Word Filter - Drop low-information function words
======================================================
"""

from typing import AbstractSet, Iterable, List, Optional

from .lexicon import STOP_WORDS


def remove_stop_words(
    tokens: Iterable[str],
    stop_words: AbstractSet[str] = STOP_WORDS
) -> List[str]:
    """
    Remove stop words, keeping the relative order of everything else.

    Tokens are expected to be normalized already, so matching is exact.
    Applying the filter twice gives the same result as applying it once.
    """
    return [token for token in tokens if token not in stop_words]


class StopWordFilter:
    """Stop-word removal bound to a fixed word set."""

    def __init__(self, stop_words: Optional[AbstractSet[str]] = None):
        self.stop_words = frozenset(STOP_WORDS if stop_words is None else stop_words)

    def remove(self, tokens: Iterable[str]) -> List[str]:
        return remove_stop_words(tokens, self.stop_words)

    def __contains__(self, word: str) -> bool:
        return word in self.stop_words
