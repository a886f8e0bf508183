from .codec import (Feedback, ALL_CORRECT, decode_pattern, encode_pattern, format_pattern,
                    parse_feedback, vec_to_word, word_to_vec)
from .errors import (GameOver, InvalidFeedback, InvalidWord, MalformedTable, OutOfRangeIndex,
                     SessionBusy)
from .scoring import simulate, pattern_code
from .tables import WordTables, initialize
from .metrics import Metric, score, compute_scores
from .constraints import filter_candidates, filter_with_count, replay_history
from .selection import select_best
from .validation import validate_guess

__all__ = [
    "Feedback", "ALL_CORRECT", "decode_pattern", "encode_pattern", "format_pattern",
    "parse_feedback", "vec_to_word", "word_to_vec",
    "GameOver", "InvalidFeedback", "InvalidWord", "MalformedTable", "OutOfRangeIndex",
    "SessionBusy",
    "simulate", "pattern_code", "WordTables", "initialize",
    "Metric", "score", "compute_scores",
    "filter_candidates", "filter_with_count", "replay_history",
    "select_best", "validate_guess",
]
