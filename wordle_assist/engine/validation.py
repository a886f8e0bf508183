"""
Lightweight guess validation.

Answers the question: "may this word be played as a guess?"
A guess is valid iff:
  - it is a string
  - it is alphabetic a-z only, exactly 5 letters (case-insensitive)
  - it exists in the guess table

The interactive assistant uses this to vet words the user typed instead of
the suggestion; the session rejects anything else with InvalidWord.
"""

from __future__ import annotations

from .codec import is_valid_word
from .tables import WordTables


def validate_guess(word: str, tables: WordTables) -> bool:
    """Return True if `word` is a legal guess per the rules above."""
    if not isinstance(word, str) or not is_valid_word(word):
        return False
    # WordTables keeps a word -> index map, so membership is O(1)
    return word in tables
