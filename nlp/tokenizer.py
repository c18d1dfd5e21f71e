"""
Tokenizer - Raw text to normalized word tokens
==============================================
"""

from typing import List


def _clean(piece: str) -> str:
    """Lowercase a piece and drop every character that is not a letter or digit."""
    return "".join(ch for ch in piece.lower() if ch.isalnum())


def tokenize(text: str) -> List[str]:
    """
    Split text into lowercase, punctuation-free tokens.

    Pieces are separated by runs of whitespace. A piece that is nothing
    but punctuation disappears entirely. Order and duplicates are kept.

    Args:
        text: Raw user input

    Returns:
        List of tokens (empty for empty or whitespace-only input)

    Example:
        >>> tokenize("Hello there, I feel great today!")
        ['hello', 'there', 'i', 'feel', 'great', 'today']
    """
    tokens = []
    for piece in text.split():
        token = _clean(piece)
        if token:
            tokens.append(token)
    return tokens
