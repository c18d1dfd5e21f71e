"""
Sentibot - Rule-based conversational responder
==============================================

Tokenizes free-text input, scores its sentiment against a fixed lexicon,
classifies intent with prioritized keyword and threshold rules, and
answers from a category-indexed table of canned replies.

License: MIT
Version: 1.0.0
"""

__version__ = "1.0.0"
__license__ = "MIT"
