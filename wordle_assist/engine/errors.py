"""
Exceptions raised by the engine and the session layer.

Each one subclasses the built-in its misuse resembles, so callers that only
care about "bad value" or "bad index" can keep catching ValueError/IndexError.
A game with no remaining candidates is NOT an error: see session.Unsolvable.
"""


class MalformedTable(ValueError):
    """Guess table / answer mask violate the load contract; nothing is initialized."""


class OutOfRangeIndex(IndexError):
    """An index does not address the guess table. Always a bug upstream."""


class InvalidWord(ValueError):
    """Not a 5-letter a-z word (or 5 symbols in 1..26)."""


class InvalidFeedback(ValueError):
    """Feedback string or pattern code that cannot be decoded."""


class GameOver(RuntimeError):
    """Feedback submitted to a session that already reached a terminal state."""


class SessionBusy(RuntimeError):
    """Another submit/reset is still running on the same session."""
