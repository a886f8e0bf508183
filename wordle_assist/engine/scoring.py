"""
Wordle-style feedback for (guess, secret) pairs.

Conventions (see codec.Feedback):
  - CORRECT : right letter, right slot            ('G')
  - PRESENT : right letter, wrong slot            ('Y')
  - ABSENT  : letter not in the secret, or already
              used up by other slots              ('-')

Algorithm (two-pass, canonical for Wordle):
  1) First pass marks every CORRECT slot and counts the secret's remaining
     (unmatched) letters into a pool.
  2) Second pass walks the other slots left to right and marks PRESENT only
     while the guessed letter still has a count in the pool, consuming one
     instance each time.

`simulate` is the readable single-pair version. `pattern_matrix` is the same
rule vectorised with numpy over many guesses x many secrets; the two must
always agree (tests/test_engine.py checks this).
"""

from __future__ import annotations

from collections import Counter
from typing import List

import numpy as np

from wordle_assist.config import ALPHABET, WORD_LEN
from .codec import Feedback, Pattern, PATTERN_WEIGHTS, WordLike, as_vector, encode_pattern

_WEIGHTS = np.array(PATTERN_WEIGHTS, dtype=np.int16)
_ONE_HOT = np.eye(len(ALPHABET) + 1, dtype=np.int8)  # row v is the one-hot of symbol v


def simulate(guess: WordLike, secret: WordLike) -> Pattern:
    """
    Feedback pattern for `guess` against `secret`.

    Examples:
      simulate("belle", "level") -> (-, G, Y, Y, Y)
      simulate("speed", "erase") -> (Y, -, Y, Y, -)
    """
    g = as_vector(guess)
    s = as_vector(secret)
    pattern: List[Feedback] = [Feedback.ABSENT] * WORD_LEN

    # Pass 1: greens, and the pool of secret letters not matched in place.
    remaining: Counter = Counter()
    for i, (gc, sc) in enumerate(zip(g, s)):
        if gc == sc:
            pattern[i] = Feedback.CORRECT
        else:
            remaining[sc] += 1

    # Pass 2: yellows, capped by the remaining multiplicity in the secret.
    for i, gc in enumerate(g):
        if pattern[i] is Feedback.CORRECT:
            continue
        if remaining[gc] > 0:
            pattern[i] = Feedback.PRESENT
            remaining[gc] -= 1

    return tuple(pattern)


def pattern_code(guess: WordLike, secret: WordLike) -> int:
    """simulate() followed by encode_pattern()."""
    return encode_pattern(simulate(guess, secret))


def pattern_matrix(guesses: np.ndarray, secrets: np.ndarray) -> np.ndarray:
    """
    Pattern codes for every (guess, secret) pair.

    Args:
      guesses : (G, 5) integer array of letter symbols 1..26
      secrets : (S, 5) integer array of letter symbols 1..26

    Returns:
      (G, S) uint8 array; out[i, j] == pattern_code(guesses[i], secrets[j])

    Memory is O(G * S * 27) bytes; callers chunk the guess axis.
    """
    guesses = np.asarray(guesses, dtype=np.intp)
    secrets = np.asarray(secrets, dtype=np.intp)
    n_g, n_s = guesses.shape[0], secrets.shape[0]

    green = guesses[:, None, :] == secrets[None, :, :]  # (G, S, 5)
    codes = (green * (2 * _WEIGHTS)).sum(axis=2, dtype=np.int16)

    # Pass 1: per-letter pool of secret letters not matched in place.
    pool = np.zeros((n_g, n_s, _ONE_HOT.shape[0]), dtype=np.int8)
    for i in range(WORD_LEN):
        pool += _ONE_HOT[secrets[:, i]][None, :, :] * (~green[:, :, i])[:, :, None]

    # Pass 2: left to right, consume one pool instance per yellow.
    rows = np.arange(n_g)[:, None]
    cols = np.arange(n_s)[None, :]
    for i in range(WORD_LEN):
        letter = guesses[:, i][:, None]  # (G, 1), broadcast over secrets
        present = ~green[:, :, i] & (pool[rows, cols, letter] > 0)
        codes += present * _WEIGHTS[i]
        pool[rows, cols, letter] -= present.astype(np.int8)

    return codes.astype(np.uint8)
