"""
Dialogue Selector - Intent classification, reply choice and input history
=========================================================================

The selector owns the response table, the intent classifier, a seedable
random source and the bounded history of raw inputs.
"""

import random
from collections import deque
from typing import Deque, Optional, Sequence, Tuple

from core.exceptions import ConfigError, ResponseTableError
from core.logging import get_logger
from rules.engine import IntentClassifier, RuleMatch
from rules.responses import ResponseTable

logger = get_logger("services.dialogue")


FALLBACK_RESPONSE = "I'm not sure how to respond to that."
DEFAULT_HISTORY_SIZE = 10


class ConversationHistory:
    """
    Bounded FIFO of raw user inputs.

    Appending past the maximum evicts the oldest entry. Readers get an
    immutable snapshot rather than the underlying buffer.
    """

    def __init__(self, max_size: int = DEFAULT_HISTORY_SIZE):
        if max_size < 1:
            raise ConfigError(f"History size must be at least 1, got {max_size}")
        self._entries: Deque[str] = deque(maxlen=max_size)

    @property
    def max_size(self) -> int:
        return self._entries.maxlen

    def append(self, entry: str) -> None:
        self._entries.append(entry)

    def snapshot(self) -> Tuple[str, ...]:
        """Current entries, oldest first."""
        return tuple(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


class DialogueSelector:
    """
    Picks a reply for a classified turn and records raw inputs.

    Example:
        selector = DialogueSelector(ResponseTable.default(), rng=random.Random(7))
        selector.get_response(["hello"], 0.0)  # one of the greetings
        selector.add_to_history("Hello!")
    """

    def __init__(
        self,
        responses: Optional[ResponseTable] = None,
        classifier: Optional[IntentClassifier] = None,
        rng: Optional[random.Random] = None,
        history_size: int = DEFAULT_HISTORY_SIZE
    ):
        """
        Initialize the selector.

        Args:
            responses: Response table (built-in replies when omitted)
            classifier: Intent classifier (standard rule ladder when omitted)
            rng: Random source for reply choice
            history_size: Maximum number of remembered inputs

        Raises:
            ResponseTableError: If the table cannot serve every category
                the classifier produces
            ConfigError: If history_size is below 1
        """
        self.responses = responses if responses is not None else ResponseTable.default()
        self.classifier = classifier or IntentClassifier()
        self.rng = rng or random.Random()
        self.history = ConversationHistory(history_size)

        missing = self.responses.missing(self.classifier.categories())
        if missing:
            raise ResponseTableError(
                "Response table is missing categories used by the classifier",
                {"missing": missing}
            )

        logger.info(
            f"Dialogue selector ready: {len(self.responses)} categories, "
            f"history size {history_size}"
        )

    def classify(self, tokens: Sequence[str], sentiment: float) -> RuleMatch:
        return self.classifier.classify(tokens, sentiment)

    def select(self, category: str) -> str:
        """
        Choose a reply for a category.

        Returns the fallback reply when the category is unknown or empty.
        """
        candidates = self.responses.get(category)
        if not candidates:
            logger.warning(f"No replies for category '{category}', using fallback")
            return FALLBACK_RESPONSE
        return self.rng.choice(candidates)

    def get_response(self, tokens: Sequence[str], sentiment: float) -> str:
        """
        Classify a turn and return a reply from the matching category.

        Args:
            tokens: Filtered tokens
            sentiment: Sentiment score of the tokens

        Returns:
            Reply string
        """
        match = self.classify(tokens, sentiment)
        return self.select(match.category)

    def add_to_history(self, raw_input: str) -> None:
        self.history.append(raw_input)

    def history_snapshot(self) -> Tuple[str, ...]:
        return self.history.snapshot()
