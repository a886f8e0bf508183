"""
Candidate filtering given feedback.

Given:
  - a candidate set (indices of possible answers still alive)
  - the guess that was played
  - the observed pattern code for it

Return:
  - the candidates that would have produced exactly that pattern,
    in their original order, as a fresh tuple.

This is the core step that turns feedback into a shrinking candidate set.
`replay_history` folds it over a whole (guess, pattern) log, so a caller that
keeps its own history can rebuild the set without holding engine state.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence, Tuple, Union

import numpy as np

from .codec import WordLike, as_vector, to_code
from .scoring import pattern_matrix
from .tables import CandidateSet, WordTables

log = logging.getLogger(__name__)

# History is a sequence of (guess, pattern) tuples; patterns in any form to_code accepts.
History = Iterable[Tuple[WordLike, Union[int, str, Sequence[int]]]]


def filter_candidates(candidates: Sequence[int], guess: WordLike, observed,
                      tables: WordTables) -> CandidateSet:
    """
    Keep only candidates c with pattern(guess, c) == observed.

    Args:
      candidates : candidate indices into `tables`
      guess      : the word played (text or vector; need not be a possible answer)
      observed   : the feedback received (code 0..242, text like "-GY--", or slots)
      tables     : the immutable word tables

    Returns:
      CandidateSet (tuple of ints), never longer than `candidates`.
    """
    code = to_code(observed)
    candidates = tuple(int(c) for c in candidates)
    if not candidates:
        return ()

    cand_vecs = tables.candidate_vectors(candidates)
    g = np.array([as_vector(guess)], dtype=np.uint8)
    keep = pattern_matrix(g, cand_vecs)[0] == code

    out = tuple(c for c, k in zip(candidates, keep) if k)
    log.debug("filter: %d -> %d candidates", len(candidates), len(out))
    return out


def filter_with_count(candidates: Sequence[int], guess: WordLike, observed,
                      tables: WordTables) -> Tuple[CandidateSet, int]:
    """filter_candidates plus the surviving count, as the front end consumes it."""
    out = filter_candidates(candidates, guess, observed, tables)
    return out, len(out)


def replay_history(history: History, tables: WordTables,
                   candidates: Sequence[int] | None = None) -> CandidateSet:
    """
    Apply every (guess, pattern) in order, starting from `candidates`
    (default: all possible answers). Stops early once nothing is left.
    """
    current = tables.initial_candidates() if candidates is None else tuple(candidates)
    for guess, patt in history:
        if not current:
            break
        current = filter_candidates(current, guess, patt, tables)
    return current
