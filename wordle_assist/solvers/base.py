from __future__ import annotations
from typing import Dict, Sequence, Tuple, Type

from wordle_assist.engine.tables import WordTables

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    """
    A solver maps a candidate set to one guess over fixed word tables.
    Solvers are deterministic: no RNG, same input -> same guess.
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.tables: WordTables | None = None

    def reset(self, *, tables: WordTables) -> None:
        self.tables = tables

    def choose(self, candidates: Sequence[int]) -> Tuple[int, str]:
        """Return (guess-table index, word) for the candidate set."""
        raise NotImplementedError("Override in subclass")

    def _require_tables(self) -> WordTables:
        if self.tables is None:
            raise RuntimeError(f"{self.id}: call reset(tables=...) before choosing guesses")
        return self.tables
