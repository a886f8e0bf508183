"""
Per-game candidate-set ownership and the game state machine.

States:
  Active(candidates, guess_index, guess) : >= 2 candidates, a suggestion is ready
  Solved(index, word)                    : exactly 1 candidate, or all-green feedback
  Unsolvable()                           : 0 candidates; only reset() leaves it

The engine itself is stateless. A CandidateSetManager is the one explicit
piece of game state, created and owned by the caller (CLI, harness, tests).
The history log stays with the caller as well.

One operation at a time: a submit() or reset() that starts while another is
still running (e.g. scoring on a worker thread) raises SessionBusy. The new
state is only published once filtering AND the next suggestion are complete,
so an abandoned call never leaves a half-updated snapshot behind.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Sequence, Union

from wordle_assist.config import DEFAULT_OPENING
from wordle_assist.engine.codec import ALL_CORRECT, WordLike, to_code, vec_to_word, as_vector
from wordle_assist.engine.constraints import filter_candidates
from wordle_assist.engine.errors import GameOver, InvalidWord, SessionBusy
from wordle_assist.engine.tables import CandidateSet, WordTables
from wordle_assist.engine.validation import validate_guess
from wordle_assist.solvers import BaseSolver, create_solver

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Active:
    candidates: CandidateSet
    guess_index: int
    guess: str

    @property
    def count(self) -> int:
        return len(self.candidates)


@dataclass(frozen=True)
class Solved:
    index: int
    word: str

    @property
    def count(self) -> int:
        return 1


@dataclass(frozen=True)
class Unsolvable:
    @property
    def count(self) -> int:
        return 0


GameState = Union[Active, Solved, Unsolvable]


class CandidateSetManager:
    """
    Drive one game: hold the live candidate set, apply feedback, keep a
    suggestion ready.

    Args:
      tables  : the immutable word tables
      solver  : a BaseSolver (default: the "hybrid" solver)
      opening : first suggestion of every game if it is in the guess table;
                None computes it like any other round (slow on full tables)
    """

    def __init__(self, tables: WordTables, *, solver: BaseSolver | None = None,
                 opening: str | None = DEFAULT_OPENING):
        self.tables = tables
        self.solver = solver if solver is not None else create_solver("hybrid")
        self.solver.reset(tables=tables)
        self.opening = opening
        self._lock = threading.Lock()
        self._state: GameState = self._initial_state()

    # ---- read-only views ----

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def candidates(self) -> CandidateSet:
        st = self._state
        if isinstance(st, Active):
            return st.candidates
        if isinstance(st, Solved):
            return (st.index,)
        return ()

    @property
    def is_over(self) -> bool:
        return not isinstance(self._state, Active)

    @property
    def busy(self) -> bool:
        return self._lock.locked()

    # ---- transitions ----

    def reset(self) -> GameState:
        """Back to the initial state (all possible answers) from any state."""
        with self._exclusive():
            self._state = self._initial_state()
            return self._state

    def submit(self, pattern: int | str | Sequence[int],
               guess: WordLike | None = None) -> GameState:
        """
        Apply the feedback observed for `guess` (default: the current suggestion).

        Returns the new state. Active results already carry the next suggestion.

        Raises:
          GameOver        if the game already ended
          InvalidWord     if `guess` is not a legal guess
          InvalidFeedback if `pattern` cannot be decoded
          SessionBusy     if another operation is in flight
        """
        with self._exclusive():
            st = self._state
            if not isinstance(st, Active):
                raise GameOver(f"game already ended: {st!r}; reset() to start over")

            word = st.guess if guess is None else self._legal_guess(guess)
            code = to_code(pattern)

            idx = self.tables.index_of(word)
            if code == ALL_CORRECT and idx in st.candidates:
                log.info("all-correct feedback for %r: solved", word)
                self._state = Solved(idx, word)
                return self._state

            remaining = filter_candidates(st.candidates, word, code, self.tables)
            log.info("%s: %d -> %d candidates", word, st.count, len(remaining))
            self._state = self._settle(remaining)
            return self._state

    # ---- internals ----

    @contextmanager
    def _exclusive(self) -> Iterator[None]:
        if not self._lock.acquire(blocking=False):
            raise SessionBusy("another operation is running on this session")
        try:
            yield
        finally:
            self._lock.release()

    def _legal_guess(self, guess: WordLike) -> str:
        word = guess if isinstance(guess, str) else vec_to_word(as_vector(guess))
        if not validate_guess(word, self.tables):
            raise InvalidWord(f"not a legal guess: {guess!r}")
        return word.strip().lower()

    def _initial_state(self) -> GameState:
        initial = self.tables.initial_candidates()
        if len(initial) >= 2 and self.opening is not None and self.opening in self.tables:
            idx = self.tables.index_of(self.opening)
            return Active(initial, idx, self.tables.words[idx])
        if self.opening is not None and self.opening not in self.tables:
            log.warning("opening %r is not in the guess table; computing the first guess",
                        self.opening)
        return self._settle(initial)

    def _settle(self, remaining: CandidateSet) -> GameState:
        """Classify a filtered set; for >= 2 candidates compute the next suggestion now."""
        if not remaining:
            return Unsolvable()
        if len(remaining) == 1:
            idx = remaining[0]
            return Solved(idx, self.tables.word(idx))
        idx, word = self.solver.choose(remaining)
        return Active(remaining, idx, word)
