"""
Minimax solver: minimise the worst-case number of surviving candidates.

Ties are broken by entropy, then by preferring possible answers, then by
guess-table order. Cheaper to reason about than entropy and very strong
late in the game; early on it tends to leave more candidates on average.
"""

from __future__ import annotations

from typing import Sequence, Tuple

from wordle_assist.engine.metrics import Metric
from wordle_assist.engine.selection import select_with_metric
from .base import BaseSolver, register


@register
class MinimaxSolver(BaseSolver):
    id = "minimax"
    name = "Minimax (Smallest Worst Bucket)"
    version = "1.0.0"

    def choose(self, candidates: Sequence[int]) -> Tuple[int, str]:
        return select_with_metric(candidates, self._require_tables(), Metric.MINIMAX)
