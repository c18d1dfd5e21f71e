"""
Test Dialogue Module
====================

Unit tests for the dialogue selector and the bounded history.
"""

import random

import pytest
from pathlib import Path
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.exceptions import ConfigError, ResponseTableError
from rules.engine import IntentClassifier
from rules.responses import ResponseTable, DEFAULT_RESPONSES
from services.dialogue import ConversationHistory, DialogueSelector, FALLBACK_RESPONSE


class TestConversationHistory:
    """Tests for ConversationHistory class."""

    def test_default_size(self):
        assert ConversationHistory().max_size == 10

    def test_keeps_last_entries_in_order(self):
        history = ConversationHistory(10)
        for i in range(15):
            history.append(f"message {i}")

        assert len(history) == 10
        assert history.snapshot() == tuple(f"message {i}" for i in range(5, 15))

    def test_never_exceeds_maximum(self):
        history = ConversationHistory(3)
        for i in range(50):
            history.append(str(i))
            assert len(history) <= 3

    def test_snapshot_is_a_copy(self):
        history = ConversationHistory(2)
        history.append("one")
        snapshot = history.snapshot()
        history.append("two")
        assert snapshot == ("one",)

    def test_clear(self):
        history = ConversationHistory(2)
        history.append("one")
        history.clear()
        assert history.snapshot() == ()

    def test_size_must_be_positive(self):
        with pytest.raises(ConfigError):
            ConversationHistory(0)


class TestDialogueSelector:
    """Tests for DialogueSelector class."""

    def setup_method(self):
        self.selector = DialogueSelector(rng=random.Random(1234))

    def test_hello_always_greets(self):
        for sentiment in (-2.0, -0.6, 0.0, 0.6, 2.0):
            response = self.selector.get_response(["hello"], sentiment)
            assert response in DEFAULT_RESPONSES["greetings"]

    def test_greeting_beats_farewell(self):
        response = self.selector.get_response(["goodbye", "hi"], 0.0)
        assert response in DEFAULT_RESPONSES["greetings"]

    def test_farewell(self):
        response = self.selector.get_response(["bye", "that", "was", "terrible"], -2.0)
        assert response in DEFAULT_RESPONSES["farewells"]

    def test_sentiment_driven(self):
        assert self.selector.get_response(["excellent"], 2.0) in DEFAULT_RESPONSES["positive"]
        assert self.selector.get_response(["terrible"], -2.0) in DEFAULT_RESPONSES["negative"]
        assert self.selector.get_response([], 0.0) in DEFAULT_RESPONSES["default"]

    def test_seeded_selection_is_reproducible(self):
        first = DialogueSelector(rng=random.Random(99))
        second = DialogueSelector(rng=random.Random(99))
        picks_a = [first.get_response([], 0.0) for _ in range(10)]
        picks_b = [second.get_response([], 0.0) for _ in range(10)]
        assert picks_a == picks_b

    def test_selection_is_uniform_over_candidates(self):
        picks = {self.selector.select("default") for _ in range(200)}
        assert picks == set(DEFAULT_RESPONSES["default"])

    def test_unknown_category_falls_back(self):
        assert self.selector.select("weather") == FALLBACK_RESPONSE
        assert FALLBACK_RESPONSE == "I'm not sure how to respond to that."

    def test_missing_category_rejected_at_init(self):
        table = ResponseTable({"greetings": ["Hi"], "default": ["Hm"]})
        with pytest.raises(ResponseTableError) as exc_info:
            DialogueSelector(responses=table)
        assert "farewells" in str(exc_info.value)

    def test_reduced_classifier_accepts_reduced_table(self):
        classifier = IntentClassifier([])
        selector = DialogueSelector(
            responses=ResponseTable({"default": ["Only reply"]}),
            classifier=classifier,
        )
        assert selector.get_response(["hello"], 2.0) == "Only reply"

    def test_empty_table_is_not_replaced_by_defaults(self):
        with pytest.raises(ResponseTableError):
            DialogueSelector(responses=ResponseTable({}))

    def test_history(self):
        selector = DialogueSelector(history_size=2)
        selector.add_to_history("first")
        selector.add_to_history("second")
        selector.add_to_history("third")
        assert selector.history_snapshot() == ("second", "third")

    def test_classify_does_not_touch_history(self):
        self.selector.get_response(["hello"], 0.0)
        assert self.selector.history_snapshot() == ()


# Run tests if executed directly
if __name__ == "__main__":
    pytest.main([__file__, "-v"])
