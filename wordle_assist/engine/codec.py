"""
Word and feedback-pattern codecs.

Words:
  - text form   : lowercase a-z, exactly WORD_LEN letters ("crane")
  - vector form : tuple of ints 1..26 ('a' == 1), e.g. (3, 18, 1, 14, 5)

Feedback patterns:
  - per-slot Feedback value: ABSENT=0, PRESENT=1, CORRECT=2
  - integer code: sum(slot_value * 3**i), i.e. weights (1, 3, 9, 27, 81);
    a bijection between the 3**5 patterns and 0..242
  - text form: '-' absent, 'Y' present, 'G' correct  (e.g. "-GYY-")

Input is forgiving (upper case, '_' or '.' for gray, a bare integer code);
output is always canonical.
"""

from __future__ import annotations

import operator
from enum import IntEnum
from typing import Iterable, Sequence, Tuple, Union

from wordle_assist.config import ALPHABET, WORD_LEN
from .errors import InvalidFeedback, InvalidWord


class Feedback(IntEnum):
    ABSENT = 0
    PRESENT = 1
    CORRECT = 2


Pattern = Tuple[Feedback, ...]
WordVec = Tuple[int, ...]
WordLike = Union[str, Sequence[int]]

PATTERN_WEIGHTS: Tuple[int, ...] = tuple(3 ** i for i in range(WORD_LEN))
NUM_PATTERNS = 3 ** WORD_LEN
ALL_CORRECT = NUM_PATTERNS - 1  # 242 == "GGGGG"

_LETTER_TO_INT = {ch: i for i, ch in enumerate(ALPHABET, start=1)}

_CHAR_TO_FEEDBACK = {
    "-": Feedback.ABSENT,
    "_": Feedback.ABSENT,
    ".": Feedback.ABSENT,
    "Y": Feedback.PRESENT,
    "G": Feedback.CORRECT,
}
_FEEDBACK_TO_CHAR = {
    Feedback.ABSENT: "-",
    Feedback.PRESENT: "Y",
    Feedback.CORRECT: "G",
}


# ---- words ----

def normalize_word(word: str) -> str:
    """Strip + lowercase; raise InvalidWord unless the result is 5 letters a-z."""
    if not isinstance(word, str):
        raise InvalidWord(f"expected a string, got {type(word).__name__}")
    w = word.strip().lower()
    if len(w) != WORD_LEN or any(ch not in _LETTER_TO_INT for ch in w):
        raise InvalidWord(f"not a {WORD_LEN}-letter a-z word: {word!r}")
    return w


def is_valid_word(word: str) -> bool:
    try:
        normalize_word(word)
    except InvalidWord:
        return False
    return True


def word_to_vec(word: str) -> WordVec:
    """'crane' -> (3, 18, 1, 14, 5)"""
    return tuple(_LETTER_TO_INT[ch] for ch in normalize_word(word))


def vec_to_word(vec: Iterable[int]) -> str:
    """(3, 18, 1, 14, 5) -> 'crane'"""
    return "".join(ALPHABET[v - 1] for v in as_vector(tuple(vec)))


def as_vector(word: WordLike) -> WordVec:
    """
    Accept either form of a word and return the vector form.
    Vectors are validated (length and symbol range) so the kernels never see
    a 0 or a 27.
    """
    if isinstance(word, str):
        return word_to_vec(word)
    vec = tuple(int(v) for v in word)
    if len(vec) != WORD_LEN or any(v < 1 or v > len(ALPHABET) for v in vec):
        raise InvalidWord(f"not a {WORD_LEN}-symbol vector in 1..{len(ALPHABET)}: {vec!r}")
    return vec


# ---- patterns ----

def encode_pattern(pattern: Sequence[int]) -> int:
    """Pattern -> integer code in [0, 242]."""
    if len(pattern) != WORD_LEN:
        raise InvalidFeedback(f"pattern must have {WORD_LEN} slots, got {len(pattern)}")
    code = 0
    for slot, w in zip(pattern, PATTERN_WEIGHTS):
        v = int(slot)
        if v not in (0, 1, 2):
            raise InvalidFeedback(f"slot value out of range: {slot!r}")
        code += v * w
    return code


def decode_pattern(code: int) -> Pattern:
    """Integer code -> pattern (inverse of encode_pattern)."""
    code = check_code(code)
    out = []
    for _ in range(WORD_LEN):
        code, digit = divmod(code, 3)
        out.append(Feedback(digit))
    return tuple(out)


def check_code(code: int) -> int:
    """Return `code` as a plain int, or raise InvalidFeedback if it is not 0..242."""
    # operator.index admits numpy integers but not floats or strings
    if isinstance(code, bool):
        raise InvalidFeedback(f"pattern code must be an integer, got {code!r}")
    try:
        code = operator.index(code)
    except TypeError as e:
        raise InvalidFeedback(f"pattern code must be an integer, got {code!r}") from e
    if not 0 <= code < NUM_PATTERNS:
        raise InvalidFeedback(f"pattern code out of range 0..{NUM_PATTERNS - 1}: {code}")
    return code


def parse_feedback(text: str) -> int:
    """
    Parse user-entered feedback into a pattern code.

    Accepted:
      - 5 chars from {'-', '_', '.'} (gray), 'Y' (yellow), 'G' (green),
        case-insensitive, surrounding whitespace ignored: "_yg__", "-GYY-"
      - a decimal code 0..242: "242"
    """
    s = text.strip().upper()
    if s.isdigit():
        return check_code(int(s))
    if len(s) != WORD_LEN:
        raise InvalidFeedback(f"feedback must be {WORD_LEN} characters, got {text!r}")
    try:
        return encode_pattern([_CHAR_TO_FEEDBACK[ch] for ch in s])
    except KeyError as e:
        raise InvalidFeedback(f"unknown feedback character {e.args[0]!r} in {text!r}") from e


def to_code(pattern: int | str | Sequence[int]) -> int:
    """Normalize any accepted pattern form (code, text, slot sequence) to a code."""
    if isinstance(pattern, str):
        return parse_feedback(pattern)
    if isinstance(pattern, (list, tuple)):
        return encode_pattern(pattern)
    return check_code(pattern)


def format_pattern(pattern: int | Sequence[int]) -> str:
    """Code or pattern -> canonical text, e.g. 242 -> 'GGGGG'."""
    slots = decode_pattern(pattern) if not isinstance(pattern, (list, tuple)) else pattern
    return "".join(_FEEDBACK_TO_CHAR[Feedback(int(s))] for s in slots)
