"""
Sentiment Scorer - Lexicon-based sentiment averaging
====================================================

Scores a token sequence as the unweighted mean of the lexicon scores of
the tokens that appear in the lexicon. Tokens outside the lexicon do not
count toward the average.
"""

from typing import Iterable, List, Mapping, Optional, Tuple

from .lexicon import Lexicon, SENTIMENT_SCORES


NEUTRAL = 0.0


def analyze_sentiment(
    tokens: Iterable[str],
    scores: Mapping[str, float] = SENTIMENT_SCORES
) -> float:
    """
    Average the lexicon scores of matched tokens.

    Args:
        tokens: Normalized tokens (stop words already removed)
        scores: word -> signed score table

    Returns:
        Mean score over matched tokens, or exactly 0.0 when nothing matches

    Example:
        >>> analyze_sentiment(["great", "terrible"])
        -0.25
    """
    total = 0.0
    matched = 0
    for token in tokens:
        if token in scores:
            total += scores[token]
            matched += 1

    if matched == 0:
        return NEUTRAL
    return total / matched


class SentimentScorer:
    """
    Sentiment scoring bound to a lexicon.

    Example:
        scorer = SentimentScorer(Lexicon.default())
        scorer.analyze(["i", "am", "happy"])  # 1.0
    """

    def __init__(self, lexicon: Optional[Lexicon] = None):
        self.lexicon = lexicon or Lexicon.default()

    def analyze(self, tokens: Iterable[str]) -> float:
        return analyze_sentiment(tokens, self.lexicon.sentiment_scores)

    def matches(self, tokens: Iterable[str]) -> List[Tuple[str, float]]:
        """Tokens that contributed to the score, with their scores, in order."""
        scores = self.lexicon.sentiment_scores
        return [(token, scores[token]) for token in tokens if token in scores]
