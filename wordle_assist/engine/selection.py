"""
Best-guess selection over the full guess table.

Policy (select_best):
  1. One candidate left      -> play it, no scoring.
  2. Fewer than 31 candidates -> rank by MINIMAX (smallest worst bucket),
     otherwise                -> rank by ENTROPY (most expected bits).
  3. Keep every guess that hits the best score exactly.
  4. Minimax ties            -> keep those with the highest entropy among them.
  5. Still tied              -> prefer guesses that could be the answer, if any.
  6. Lowest guess-table index wins.

Step 6 is arbitrary but deterministic and reproduces the reference front
end's choice word for word.
"""

from __future__ import annotations

import logging
from typing import Sequence, Tuple

import numpy as np

from wordle_assist.config import MINIMAX_THRESHOLD
from .metrics import Metric, as_metric, compute_scores
from .tables import WordTables

log = logging.getLogger(__name__)


def best_indices(scores: np.ndarray, metric: Metric) -> np.ndarray:
    """Positions attaining the extremal score (exact equality), ascending."""
    best = scores.max() if metric.maximize else scores.min()
    return np.flatnonzero(scores == best)


def _break_ties_by_entropy(tied: np.ndarray, candidates: Sequence[int],
                           tables: WordTables) -> np.ndarray:
    ent = compute_scores(candidates, tables, Metric.ENTROPY, guess_indices=tied)
    return tied[ent == ent.max()]


def _prefer_answers(tied: np.ndarray, tables: WordTables) -> np.ndarray:
    answers = tied[tables.answer_mask[tied]]
    return answers if answers.size else tied


def select_with_metric(candidates: Sequence[int], tables: WordTables,
                       metric: Metric | str) -> Tuple[int, str]:
    """
    Steps 3-6 of the policy with a fixed primary metric.
    Used directly by the single-metric solvers.
    """
    metric = as_metric(metric)
    candidates = tuple(candidates)
    if not candidates:
        raise ValueError("cannot select a guess for an empty candidate set")
    if len(candidates) == 1:
        idx = tables.check_index(candidates[0])
        return idx, tables.words[idx]

    scores = compute_scores(candidates, tables, metric)
    tied = best_indices(scores, metric)
    log.debug("%s: best=%s, %d guess(es) tied", metric.value, scores[tied[0]], tied.size)

    if metric is Metric.MINIMAX and tied.size > 1:
        tied = _break_ties_by_entropy(tied, candidates, tables)
    if tied.size > 1:
        tied = _prefer_answers(tied, tables)

    idx = tables.check_index(tied[0])
    return idx, tables.words[idx]


def choose_metric(n_candidates: int, threshold: int = MINIMAX_THRESHOLD) -> Metric:
    return Metric.MINIMAX if n_candidates < threshold else Metric.ENTROPY


def select_best(candidates: Sequence[int], tables: WordTables, *,
                threshold: int = MINIMAX_THRESHOLD) -> Tuple[int, str]:
    """
    Recommend the next guess for a candidate set.

    Returns:
      (guess-table index, guess word)

    Raises:
      ValueError on an empty candidate set, OutOfRangeIndex on a bad index.
    """
    candidates = tuple(candidates)
    if len(candidates) == 1:
        idx = tables.check_index(candidates[0])
        return idx, tables.words[idx]
    metric = choose_metric(len(candidates), threshold)
    log.debug("selecting among %d candidates with %s", len(candidates), metric.value)
    return select_with_metric(candidates, tables, metric)
