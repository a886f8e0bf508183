"""
Hybrid solver: minimax on small candidate sets, entropy on large ones.

This is the assistant's default and the full selection policy of
engine.selection.select_best, including its tie-breaks. THRESHOLD is the
candidate count at which ranking switches from minimax to entropy.
"""

from __future__ import annotations

from typing import Sequence, Tuple

from wordle_assist.config import MINIMAX_THRESHOLD
from wordle_assist.engine.selection import select_best
from .base import BaseSolver, register


@register
class HybridSolver(BaseSolver):
    id = "hybrid"
    name = "Minimax below threshold, Entropy above"
    version = "1.0.0"

    THRESHOLD = MINIMAX_THRESHOLD

    def choose(self, candidates: Sequence[int]) -> Tuple[int, str]:
        return select_best(candidates, self._require_tables(), threshold=self.THRESHOLD)
