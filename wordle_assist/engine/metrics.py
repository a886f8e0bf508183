"""
Guess quality metrics over a candidate set.

For a guess g, partition the candidates by the feedback pattern g would
produce against each of them; with bucket sizes k_1..k_m (sum n):

  - ENTROPY : -sum (k/n) log2(k/n)   expected information in bits, higher is better,
              at most log2(n), reached only when every bucket is a singleton
  - MINIMAX : max k                  worst-case survivors, lower is better

Entropy is evaluated as log2(n) - sum(k log2 k) / n with the k's summed in
ascending order. The result then depends only on the multiset of bucket sizes,
so two guesses that split the candidates alike score bit-for-bit equal and the
selector's exact-equality tie detection sees them as tied. A singleton split
contributes exactly 0 to the sum and scores exactly log2(n).
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Sequence

import numpy as np

from wordle_assist.config import SCORE_CHUNK
from .codec import NUM_PATTERNS, WordLike, as_vector
from .scoring import pattern_matrix
from .tables import WordTables

log = logging.getLogger(__name__)


class Metric(str, Enum):
    ENTROPY = "entropy"
    MINIMAX = "minimax"

    @property
    def maximize(self) -> bool:
        return self is Metric.ENTROPY


def as_metric(metric: Metric | str) -> Metric:
    try:
        return Metric(metric)
    except ValueError:
        raise ValueError(
            f"Unknown metric: {metric!r}. Available: {[m.value for m in Metric]}") from None


def bucket_counts(codes: np.ndarray) -> np.ndarray:
    """(G, S) pattern codes -> (G, 243) bucket sizes per guess."""
    n_g = codes.shape[0]
    flat = codes.astype(np.intp) + (np.arange(n_g, dtype=np.intp) * NUM_PATTERNS)[:, None]
    return np.bincount(flat.ravel(), minlength=n_g * NUM_PATTERNS).reshape(n_g, NUM_PATTERNS)


def _rows_score(counts: np.ndarray, n: int, metric: Metric) -> np.ndarray:
    if metric is Metric.MINIMAX:
        return counts.max(axis=1).astype(np.float64)
    k = np.sort(counts, axis=1).astype(np.float64)
    klogk = k * np.log2(np.where(k > 0, k, 1.0))
    return np.log2(float(n)) - klogk.sum(axis=1) / n


def score(guess: WordLike, candidates: Sequence[WordLike], metric: Metric | str) -> float:
    """
    Score one guess against a candidate list (words or 5-symbol vectors).
    Same arithmetic as compute_scores, so the two agree exactly.
    """
    metric = as_metric(metric)
    if len(candidates) == 0:
        raise ValueError("cannot score against an empty candidate set")
    g = np.array([as_vector(guess)], dtype=np.uint8)
    c = np.array([as_vector(w) for w in candidates], dtype=np.uint8)
    counts = bucket_counts(pattern_matrix(g, c))
    return float(_rows_score(counts, len(candidates), metric)[0])


def compute_scores(
        candidates: Sequence[int],
        tables: WordTables,
        metric: Metric | str,
        *,
        guess_indices: Sequence[int] | None = None,
        chunk: int = SCORE_CHUNK,
) -> np.ndarray:
    """
    Score every guess-table entry against the candidate set.

    Args:
      candidates    : candidate indices into `tables` (possible answers only)
      tables        : the immutable word tables
      metric        : Metric.ENTROPY or Metric.MINIMAX (or their names)
      guess_indices : restrict scoring to these guess rows (default: all)
      chunk         : guess rows per kernel call

    Returns:
      float64 array aligned with `guess_indices` (or the whole table).
      Freshly allocated on every call; nothing is cached between rounds.
    """
    metric = as_metric(metric)
    cand_vecs = tables.candidate_vectors(candidates)
    n = cand_vecs.shape[0]
    if n == 0:
        raise ValueError("cannot score against an empty candidate set")

    if guess_indices is None:
        guess_vecs = tables.vectors
    else:
        rows = [tables.check_index(i) for i in guess_indices]
        guess_vecs = tables.vectors[np.asarray(rows, dtype=np.intp)]

    out = np.empty(guess_vecs.shape[0], dtype=np.float64)
    for start in range(0, guess_vecs.shape[0], chunk):
        block = guess_vecs[start:start + chunk]
        counts = bucket_counts(pattern_matrix(block, cand_vecs))
        out[start:start + block.shape[0]] = _rows_score(counts, n, metric)

    log.debug("scored %d guesses against %d candidates (%s)", out.shape[0], n, metric.value)
    return out
