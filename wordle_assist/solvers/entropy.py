"""
Entropy Solver (expected information gain).

  - For each guess g in the FULL guess table, partition the CURRENT candidates
    by feedback pattern and compute Shannon entropy over the buckets.
  - Pick the maximum; ties go to possible answers, then to the lowest index.

No pool pre-selection: the vectorised kernel scores every legal guess.
"""

from __future__ import annotations

from typing import Sequence, Tuple

from wordle_assist.engine.metrics import Metric
from wordle_assist.engine.selection import select_with_metric
from .base import BaseSolver, register


@register
class EntropySolver(BaseSolver):
    id = "entropy"
    name = "Entropy (Expected Information Gain)"
    version = "2.0.0"

    def choose(self, candidates: Sequence[int]) -> Tuple[int, str]:
        return select_with_metric(candidates, self._require_tables(), Metric.ENTROPY)
