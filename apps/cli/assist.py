# apps/cli/assist.py
"""
Interactive Wordle assistant.

Shows the suggested guess; you play it in the real game and type back the
colors you got. Repeat until solved.

Feedback: 5 characters, '-' (or '_' / '.') gray, 'Y' yellow, 'G' green,
e.g. "-GY--". Other commands:

    play WORD FEEDBACK   you played WORD instead of the suggestion
    list                 show up to 20 remaining candidates
    reset                start a new game
    quit                 exit

Usage:
    python -m apps.cli.assist --answers answers_5.txt --allowed allowed_5.txt
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Iterable, List, Tuple

from wordle_assist.config import DEFAULT_ALLOWED_PATH, DEFAULT_ANSWERS_PATH, DEFAULT_OPENING
from wordle_assist.datasets import load_tables
from wordle_assist.engine import (GameOver, InvalidFeedback, InvalidWord, MalformedTable,
                                  format_pattern, parse_feedback)
from wordle_assist.session import Active, CandidateSetManager, Solved
from wordle_assist.solvers import create_solver, get_solver_ids

LIST_LIMIT = 20


def describe(mgr: CandidateSetManager) -> str:
    """Status line for the current state."""
    st = mgr.state
    if isinstance(st, Active):
        return f"Candidates remaining: {st.count} | Suggested guess: {st.guess.upper()}"
    if isinstance(st, Solved):
        return f"Solved! The word is: {st.word.upper()}"
    return "Error: No words match this pattern."


def format_history(history: List[Tuple[str, str]]) -> str:
    return "\n".join(f"  {w.upper()}  {p}" for w, p in history)


def handle(mgr: CandidateSetManager, history: List[Tuple[str, str]], line: str) -> str | None:
    """
    Process one input line; returns the text to show, or None to quit.
    The history log is owned here, not by the session.
    """
    cmd = line.strip()
    low = cmd.lower()
    if not cmd:
        return describe(mgr)
    if low in ("quit", "exit", "q"):
        return None
    if low == "reset":
        history.clear()
        mgr.reset()
        return describe(mgr)
    if low == "list":
        cands = mgr.candidates
        shown = " ".join(mgr.tables.words[i] for i in cands[:LIST_LIMIT])
        more = f" ... (+{len(cands) - LIST_LIMIT})" if len(cands) > LIST_LIMIT else ""
        return f"{len(cands)} candidate(s): {shown}{more}"

    parts = cmd.split()
    if parts[0].lower() == "play":
        if len(parts) != 3:
            return "usage: play WORD FEEDBACK"
        guess, feedback = parts[1].lower(), parts[2]
    else:
        st = mgr.state
        guess, feedback = (st.guess if isinstance(st, Active) else ""), cmd

    try:
        code = parse_feedback(feedback)
        mgr.submit(code, guess=guess or None)
    except (InvalidFeedback, InvalidWord) as e:
        return f"error: {e}"
    except GameOver:
        return "Game over; type 'reset' to start again."

    history.append((guess, format_pattern(code)))
    return format_history(history) + "\n" + describe(mgr)


def run(mgr: CandidateSetManager, lines: Iterable[str], out: Callable[[str], None] = print) -> None:
    """Drive the assistant from an iterable of input lines until 'quit' or EOF."""
    history: List[Tuple[str, str]] = []
    out(describe(mgr))
    for line in lines:
        was_over = mgr.is_over
        msg = handle(mgr, history, line)
        if msg is None:
            break
        out(msg)
        if mgr.is_over and not was_over:
            out("Type 'reset' for a new game or 'quit' to exit.")


def _stdin_lines() -> Iterable[str]:
    while True:
        try:
            yield input("> ")
        except EOFError:
            return


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="wordle-assist: interactive guess recommender")
    ap.add_argument("--answers", default=DEFAULT_ANSWERS_PATH, help="possible answers file")
    ap.add_argument("--allowed", default=DEFAULT_ALLOWED_PATH, help="allowed guesses file")
    ap.add_argument("--solver", default="hybrid",
                    help=f"solver id (one of: {', '.join(get_solver_ids())})")
    ap.add_argument("--opening", default=DEFAULT_OPENING,
                    help="first suggestion; 'auto' computes it (slow on full lists)")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        tables = load_tables(args.answers, args.allowed)
        solver = create_solver(args.solver)
    except (FileNotFoundError, MalformedTable, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    opening = None if args.opening == "auto" else args.opening
    mgr = CandidateSetManager(tables, solver=solver, opening=opening)
    print(__doc__.split("Usage:")[0].strip())
    run(mgr, _stdin_lines())
    return 0


if __name__ == "__main__":
    sys.exit(main())
