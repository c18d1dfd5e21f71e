"""
NLP Module - Text normalization and lexicon-based analysis
==========================================================

This module provides the analysis half of the pipeline:
- Tokenization into lowercase, punctuation-free words
- Stop-word removal
- Sentiment scoring against a fixed lexicon
"""

from .lexicon import Lexicon, STOP_WORDS, SENTIMENT_SCORES, SYNONYMS
from .tokenizer import tokenize
from .stopwords import remove_stop_words, StopWordFilter
from .sentiment import analyze_sentiment, SentimentScorer

__all__ = [
    "Lexicon",
    "STOP_WORDS",
    "SENTIMENT_SCORES",
    "SYNONYMS",
    "tokenize",
    "remove_stop_words",
    "StopWordFilter",
    "analyze_sentiment",
    "SentimentScorer",
]
