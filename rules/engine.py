"""
Rules Engine - Intent classification by prioritized rules
=========================================================

This module implements the intent classifier. Each rule maps a filtered
token sequence and its sentiment score to a response category. Rules are
evaluated in priority order and the first match wins:

1. greeting keywords   -> greetings
2. farewell keywords   -> farewells
3. sentiment above +t  -> positive
4. sentiment below -t  -> negative
5. anything else       -> default
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Iterable, List, Optional, Sequence


class Category(Enum):
    """Response categories known to the classifier."""
    GREETINGS = "greetings"
    FAREWELLS = "farewells"
    POSITIVE = "positive"
    NEGATIVE = "negative"
    DEFAULT = "default"


class RulePriority(Enum):
    """Priority levels for rules."""
    LOWEST = 0
    LOW = 25
    NORMAL = 50
    HIGH = 75
    HIGHEST = 100


class MatchType(Enum):
    """How a rule decides whether it applies."""
    KEYWORDS = "keywords"               # Any token is a keyword
    SENTIMENT_ABOVE = "sentiment_above" # Score strictly above threshold
    SENTIMENT_BELOW = "sentiment_below" # Score strictly below threshold
    ALWAYS = "always"                   # Catch-all


GREETING_WORDS: FrozenSet[str] = frozenset({"hi", "hello", "hey", "greetings"})
FAREWELL_WORDS: FrozenSet[str] = frozenset({"bye", "goodbye", "farewell", "cya"})

DEFAULT_POSITIVE_THRESHOLD = 0.5
DEFAULT_NEGATIVE_THRESHOLD = -0.5


@dataclass
class RuleMatch:
    """
    Result of a rule matching a turn.

    Attributes:
        rule (IntentRule): The matching rule
        tokens (list): Filtered tokens that were classified
        sentiment (float): Sentiment score of the turn
        keyword (str): Token that triggered a keyword rule, if any
    """
    rule: "IntentRule"
    tokens: List[str]
    sentiment: float
    keyword: Optional[str] = None

    @property
    def category(self) -> str:
        return self.rule.category.value


@dataclass
class IntentRule:
    """
    A single classification rule.

    Attributes:
        name (str): Unique rule name
        category (Category): Category assigned on match
        match_type (MatchType): How the rule matches
        keywords (frozenset): Trigger tokens for keyword rules
        threshold (float): Bound for sentiment rules
        priority (int): Higher priorities are evaluated first
        enabled (bool): Whether the rule is active
    """
    name: str
    category: Category
    match_type: MatchType = MatchType.KEYWORDS
    keywords: FrozenSet[str] = field(default_factory=frozenset)
    threshold: float = 0.0
    priority: int = RulePriority.NORMAL.value
    enabled: bool = True

    def __post_init__(self):
        self.keywords = frozenset(k.lower() for k in self.keywords)

    def matches(self, tokens: Sequence[str], sentiment: float) -> Optional[RuleMatch]:
        """
        Check if this rule applies to a turn.

        Args:
            tokens: Filtered tokens
            sentiment: Sentiment score of the tokens

        Returns:
            RuleMatch if matched, None otherwise
        """
        if not self.enabled:
            return None

        if self.match_type == MatchType.KEYWORDS:
            for token in tokens:
                if token in self.keywords:
                    return RuleMatch(rule=self, tokens=list(tokens),
                                     sentiment=sentiment, keyword=token)

        elif self.match_type == MatchType.SENTIMENT_ABOVE:
            if sentiment > self.threshold:
                return RuleMatch(rule=self, tokens=list(tokens), sentiment=sentiment)

        elif self.match_type == MatchType.SENTIMENT_BELOW:
            if sentiment < self.threshold:
                return RuleMatch(rule=self, tokens=list(tokens), sentiment=sentiment)

        elif self.match_type == MatchType.ALWAYS:
            return RuleMatch(rule=self, tokens=list(tokens), sentiment=sentiment)

        return None

    def to_dict(self) -> Dict:
        """Convert rule to dictionary."""
        return {
            "name": self.name,
            "category": self.category.value,
            "match_type": self.match_type.value,
            "keywords": sorted(self.keywords),
            "threshold": self.threshold,
            "priority": self.priority,
            "enabled": self.enabled,
        }


def default_rules(
    positive_threshold: float = DEFAULT_POSITIVE_THRESHOLD,
    negative_threshold: float = DEFAULT_NEGATIVE_THRESHOLD
) -> List[IntentRule]:
    """Build the standard five-rule classification ladder."""
    return [
        IntentRule(
            name="greeting",
            category=Category.GREETINGS,
            keywords=GREETING_WORDS,
            priority=RulePriority.HIGHEST.value,
        ),
        IntentRule(
            name="farewell",
            category=Category.FAREWELLS,
            keywords=FAREWELL_WORDS,
            priority=RulePriority.HIGH.value,
        ),
        IntentRule(
            name="positive",
            category=Category.POSITIVE,
            match_type=MatchType.SENTIMENT_ABOVE,
            threshold=positive_threshold,
            priority=RulePriority.NORMAL.value,
        ),
        IntentRule(
            name="negative",
            category=Category.NEGATIVE,
            match_type=MatchType.SENTIMENT_BELOW,
            threshold=negative_threshold,
            priority=RulePriority.LOW.value,
        ),
        IntentRule(
            name="default",
            category=Category.DEFAULT,
            match_type=MatchType.ALWAYS,
            priority=RulePriority.LOWEST.value,
        ),
    ]


class IntentClassifier:
    """
    Classifies a turn by evaluating rules in priority order.

    Example:
        classifier = IntentClassifier()
        match = classifier.classify(["hello", "great"], 1.5)
        match.category  # "greetings"
    """

    def __init__(self, rules: Optional[Iterable[IntentRule]] = None):
        """
        Initialize the classifier.

        Args:
            rules: Rules to load; the standard ladder when omitted
        """
        self.rules: List[IntentRule] = []
        for rule in (default_rules() if rules is None else rules):
            self.add_rule(rule)

    def add_rule(self, rule: IntentRule) -> None:
        """
        Add a rule.

        Rules are kept sorted by priority (highest first). Rules with equal
        priority keep their insertion order.
        """
        self.rules.append(rule)
        self.rules.sort(key=lambda r: r.priority, reverse=True)

    def remove_rule(self, name: str) -> bool:
        for i, rule in enumerate(self.rules):
            if rule.name == name:
                del self.rules[i]
                return True
        return False

    def get_rule(self, name: str) -> Optional[IntentRule]:
        for rule in self.rules:
            if rule.name == name:
                return rule
        return None

    def classify(self, tokens: Sequence[str], sentiment: float) -> RuleMatch:
        """
        Find the first matching rule for a turn.

        When no enabled rule matches (for example a custom rule set without
        a catch-all), the turn falls through to the default category.
        """
        for rule in self.rules:
            match = rule.matches(tokens, sentiment)
            if match:
                return match
        fallback = IntentRule(
            name="fallthrough",
            category=Category.DEFAULT,
            match_type=MatchType.ALWAYS,
            priority=RulePriority.LOWEST.value,
        )
        return RuleMatch(rule=fallback, tokens=list(tokens), sentiment=sentiment)

    def match_all(self, tokens: Sequence[str], sentiment: float) -> List[RuleMatch]:
        """All matching rules, in evaluation order."""
        matches = []
        for rule in self.rules:
            match = rule.matches(tokens, sentiment)
            if match:
                matches.append(match)
        return matches

    def categories(self) -> List[str]:
        """Categories this classifier can produce, including the fallthrough."""
        seen = []
        for rule in self.rules:
            if rule.category.value not in seen:
                seen.append(rule.category.value)
        if Category.DEFAULT.value not in seen:
            seen.append(Category.DEFAULT.value)
        return seen
