"""
Chatbot - Request/response orchestration
========================================

This module wires the pipeline together. One call handles one turn:

    tokenize -> remove stop words -> score sentiment
             -> classify and select reply -> record raw input

Everything runs synchronously in memory.
"""

import random
import time
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from core.config import Config
from core.logging import get_logger, set_log_context, clear_log_context
from nlp.lexicon import Lexicon
from nlp.sentiment import SentimentScorer
from nlp.stopwords import StopWordFilter
from nlp.tokenizer import tokenize
from rules.engine import IntentClassifier, default_rules
from rules.responses import ResponseTable
from .dialogue import DialogueSelector

logger = get_logger("services.chatbot")


@dataclass
class ChatResult:
    """
    Result of processing one turn.

    Attributes:
        response (str): Reply text
        category (str): Category the turn was classified into
        sentiment (float): Sentiment score of the filtered tokens
        tokens (list): Tokens after stop-word removal
        matched_keyword (str): Token that triggered a keyword rule, if any
        latency_ms (int): Processing time
    """
    response: str
    category: str
    sentiment: float
    tokens: List[str] = field(default_factory=list)
    matched_keyword: Optional[str] = None
    latency_ms: int = 0


class Chatbot:
    """
    Rule-based conversational responder.

    Example:
        bot = Chatbot(rng=random.Random(42))
        bot.process_input("Hello there, I feel great today!")
        bot.history  # ("Hello there, I feel great today!",)
    """

    def __init__(
        self,
        lexicon: Optional[Lexicon] = None,
        selector: Optional[DialogueSelector] = None,
        rng: Optional[random.Random] = None
    ):
        """
        Initialize the chatbot.

        Args:
            lexicon: Word tables (built-in lexicon when omitted)
            selector: Dialogue selector (built with defaults when omitted)
            rng: Random source for the default selector; ignored when a
                selector is given
        """
        self.lexicon = lexicon or Lexicon.default()
        self.stop_filter = StopWordFilter(self.lexicon.stop_words)
        self.scorer = SentimentScorer(self.lexicon)
        self.selector = selector or DialogueSelector(rng=rng)

        self._turns = 0
        self._categories: Counter = Counter()

    @classmethod
    def from_config(cls, config: Config, rng: Optional[random.Random] = None) -> "Chatbot":
        """
        Build a chatbot from configuration.

        Args:
            config: Application configuration
            rng: Random source; seeded from ``dialogue.seed`` when omitted

        Raises:
            ConfigError: If the configured tables are unusable
        """
        lexicon = Lexicon.default().with_overrides(
            sentiment_scores=config.lexicon.sentiment_scores,
            stop_words=config.lexicon.stop_words,
        )
        responses = ResponseTable.default().merged(config.dialogue.responses)
        classifier = IntentClassifier(default_rules(
            positive_threshold=config.dialogue.positive_threshold,
            negative_threshold=config.dialogue.negative_threshold,
        ))
        if rng is None:
            rng = random.Random(config.dialogue.seed)

        selector = DialogueSelector(
            responses=responses,
            classifier=classifier,
            rng=rng,
            history_size=config.dialogue.history_size,
        )
        logger.info(f"Chatbot built from config: {lexicon.summary()}")
        return cls(lexicon=lexicon, selector=selector)

    def respond(self, raw_input: str) -> ChatResult:
        """
        Run the full pipeline for one turn.

        Args:
            raw_input: Verbatim user input

        Returns:
            ChatResult with the reply and the analysis behind it
        """
        start_time = time.time()
        self._turns += 1
        set_log_context(turn=self._turns)

        try:
            tokens = tokenize(raw_input)
            filtered = self.stop_filter.remove(tokens)
            sentiment = self.scorer.analyze(filtered)

            match = self.selector.classify(filtered, sentiment)
            response = self.selector.select(match.category)

            self.selector.add_to_history(raw_input)
            self._categories[match.category] += 1

            latency_ms = int((time.time() - start_time) * 1000)
            logger.debug(
                f"tokens={filtered} sentiment={sentiment:.3f} "
                f"rule={match.rule.name} category={match.category}"
            )

            return ChatResult(
                response=response,
                category=match.category,
                sentiment=sentiment,
                tokens=filtered,
                matched_keyword=match.keyword,
                latency_ms=latency_ms,
            )
        finally:
            clear_log_context()

    def process_input(self, raw_input: str) -> str:
        """Process one turn and return only the reply."""
        return self.respond(raw_input).response

    @property
    def history(self) -> Tuple[str, ...]:
        return self.selector.history_snapshot()

    def stats(self) -> Dict[str, Any]:
        """Session counters."""
        return {
            "turns": self._turns,
            "categories": dict(self._categories),
            "history_length": len(self.selector.history),
            "history_size": self.selector.history.max_size,
        }
