"""
Lexicon - Static word tables used by the analysis pipeline
==========================================================

Holds the stop-word set, the sentiment-score table and the synonym-group
table. All three are process-wide and read-only: the module-level defaults
are wrapped in ``frozenset`` / ``MappingProxyType`` and the ``Lexicon``
bundle never mutates what it holds.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, Optional, Tuple


STOP_WORDS: FrozenSet[str] = frozenset({
    "the", "is", "at", "which", "on", "a", "an", "and", "or", "but",
})

SENTIMENT_SCORES: Mapping[str, float] = MappingProxyType({
    "good": 1.0,
    "great": 1.5,
    "excellent": 2.0,
    "happy": 1.0,
    "bad": -1.0,
    "terrible": -2.0,
    "sad": -1.0,
    "angry": -1.5,
})

# Reserved: nothing in scoring or classification reads these groups yet.
SYNONYMS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "good": ("fine", "nice", "pleasant"),
    "great": ("wonderful", "fantastic", "superb"),
    "happy": ("glad", "cheerful", "joyful"),
    "bad": ("poor", "awful", "unpleasant"),
    "sad": ("unhappy", "down", "sorrowful"),
    "angry": ("mad", "furious", "annoyed"),
})


@dataclass(frozen=True)
class Lexicon:
    """
    Immutable bundle of the word tables.

    Attributes:
        sentiment_scores: word -> signed score
        stop_words: tokens dropped before analysis
        synonyms: word -> ordered near-synonyms (reserved data)

    Example:
        lexicon = Lexicon.default().with_overrides(
            sentiment_scores={"awesome": 1.5},
            stop_words=["to"],
        )
    """
    sentiment_scores: Mapping[str, float] = field(default_factory=lambda: SENTIMENT_SCORES)
    stop_words: FrozenSet[str] = field(default_factory=lambda: STOP_WORDS)
    synonyms: Mapping[str, Tuple[str, ...]] = field(default_factory=lambda: SYNONYMS)

    def __post_init__(self):
        # Freeze whatever the caller handed in
        object.__setattr__(
            self, "sentiment_scores",
            MappingProxyType({k: float(v) for k, v in self.sentiment_scores.items()})
        )
        object.__setattr__(self, "stop_words", frozenset(self.stop_words))
        object.__setattr__(
            self, "synonyms",
            MappingProxyType({k: tuple(v) for k, v in self.synonyms.items()})
        )

    @classmethod
    def default(cls) -> "Lexicon":
        return cls()

    def with_overrides(
        self,
        sentiment_scores: Optional[Dict[str, float]] = None,
        stop_words: Optional[Iterable[str]] = None
    ) -> "Lexicon":
        """
        Return a new lexicon with extra entries merged in.

        Override keys are lowercased so they line up with tokenizer output.
        Existing sentiment entries with the same key are replaced.
        """
        scores = dict(self.sentiment_scores)
        for word, score in (sentiment_scores or {}).items():
            scores[word.lower()] = float(score)

        words = set(self.stop_words)
        words.update(w.lower() for w in (stop_words or []))

        return Lexicon(
            sentiment_scores=scores,
            stop_words=frozenset(words),
            synonyms=self.synonyms,
        )

    def score(self, word: str) -> Optional[float]:
        """Sentiment score for a word, or None if it is not in the lexicon."""
        return self.sentiment_scores.get(word)

    def is_stop_word(self, word: str) -> bool:
        return word in self.stop_words

    def synonyms_for(self, word: str) -> Tuple[str, ...]:
        return self.synonyms.get(word, ())

    def summary(self) -> Dict[str, int]:
        """Entry counts per table, for status output."""
        return {
            "sentiment_scores": len(self.sentiment_scores),
            "stop_words": len(self.stop_words),
            "synonym_groups": len(self.synonyms),
        }
