"""
Offline game simulation.

- run_case:  play one game against a known secret with a given solver.
- run_batch: play many (optionally only the first `sample` answers).

Feedback is simulated with the engine's own rule, so these runs exercise
exactly the path the interactive assistant takes with a human in the loop:
CandidateSetManager -> solver -> filter -> next suggestion.

Enforces Wordle's 6-turn limit at the harness layer.
"""

from __future__ import annotations

import time
from typing import Dict, List, Tuple

from wordle_assist.config import DEFAULT_OPENING, MAX_TURNS
from wordle_assist.engine import format_pattern, pattern_code
from wordle_assist.engine.tables import WordTables
from wordle_assist.session import Active, CandidateSetManager, Solved


def _assert_wordle_turns(max_turns: int) -> None:
    """Guardrail: prevent accidental runs with >6 turns."""
    if max_turns != MAX_TURNS:
        raise ValueError(f"max_turns must be {MAX_TURNS} for Wordle-like rules; got {max_turns}")


def run_case(
        solver,
        answer: str,
        *,
        tables: WordTables,
        max_turns: int = MAX_TURNS,
        opening: str | None = DEFAULT_OPENING,
) -> Dict:
    """
    Execute one game until the secret is played or the turn budget is exhausted.

    Args:
        solver:    a BaseSolver instance
        answer:    the hidden word (should be a possible answer in `tables`)
        tables:    the immutable word tables
        max_turns: must be 6 (Wordle rule; enforced)
        opening:   first guess (None = let the solver compute it)

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float), answer (str),
            history (list[(guess, pattern)]), candidates (list[int], the
            candidate count each guess was chosen from),
            unsolvable (bool; the secret fell out of the candidate set)
    """
    _assert_wordle_turns(max_turns)
    answer = answer.strip().lower()

    t0 = time.perf_counter()
    mgr = CandidateSetManager(tables, solver=solver, opening=opening)
    history: List[Tuple[str, str]] = []
    counts: List[int] = []
    success = False

    for _turn in range(1, max_turns + 1):
        state = mgr.state
        if isinstance(state, Solved):
            # The set collapsed to one word that has not been played yet.
            guess = state.word
            counts.append(1)
        elif isinstance(state, Active):
            guess = state.guess
            counts.append(state.count)
        else:
            break

        code = pattern_code(guess, answer)
        history.append((guess, format_pattern(code)))
        if guess == answer:
            success = True
            break
        if isinstance(state, Solved):
            break  # the only remaining candidate was wrong
        mgr.submit(code, guess=guess)

    dt = (time.perf_counter() - t0) * 1000.0
    return {
        "success": success,
        "guesses": len(history),
        "time_ms": dt,
        "history": history,
        "candidates": counts,
        "unsolvable": not success and mgr.candidates == (),
        "answer": answer,
    }


def run_batch(
        solver,
        *,
        tables: WordTables,
        answers: List[str] | None = None,
        max_turns: int = MAX_TURNS,
        sample: int | None = None,
        opening: str | None = DEFAULT_OPENING,
) -> List[Dict]:
    """
    Run many cases back-to-back. Defaults to every possible answer in table
    order; `sample` keeps only the first K.
    """
    _assert_wordle_turns(max_turns)

    pool = list(answers) if answers is not None else [
        tables.words[i] for i in tables.initial_candidates()]
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for ans in pool:
        r = run_case(solver, ans, tables=tables, max_turns=max_turns, opening=opening)
        r["solver_id"] = solver.id
        out.append(r)
    return out
