# apps/cli/run.py
"""
Batch simulation: play the solver against every (or a sample of) possible
answer and record how it does.

This script:
  1) Validates the word lists (counts + SHA, answers ⊆ allowed).
  2) Loads the tables and instantiates the requested solver.
  3) Plays the games with a progress bar and writes:
       - CSV:  per-game guesses, patterns and candidate counts
       - JSON: manifest with config, word-list report, summary, git commit

Usage:
    python -m apps.cli.run --solver hybrid --sample 100
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path

from tqdm import tqdm

from wordle_assist.config import (DEFAULT_ALLOWED_PATH, DEFAULT_ANSWERS_PATH, DEFAULT_OPENING,
                                  MAX_TURNS)
from wordle_assist.datasets import load_tables, pretty_summary, validate_wordlists
from wordle_assist.engine import MalformedTable
from wordle_assist.harness import run_case
from wordle_assist.harness.io import (git_commit_or_unknown, summarize, timestamp_id, write_csv,
                                      write_manifest)
from wordle_assist.solvers import create_solver, get_solver_ids


def main(argv=None) -> int:
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="wordle-assist: simulate games against known answers")
    ap.add_argument("--solver", default="hybrid", help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--answers", default=DEFAULT_ANSWERS_PATH,
                    help="path to possible answers (one word per line)")
    ap.add_argument("--allowed", default=DEFAULT_ALLOWED_PATH,
                    help="path to allowed guesses (should be a superset of answers)")
    ap.add_argument("--opening", default=DEFAULT_OPENING,
                    help="first guess of every game; 'auto' computes it (slow)")
    ap.add_argument("--sample", type=int, help="play only this many answers")
    ap.add_argument("--seed", type=int, default=123, help="seed for choosing the sample")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["bar", "off"], default="bar")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    # 1) Validate word lists and print a one-line summary
    rep = validate_wordlists(args.answers, args.allowed)
    print(pretty_summary(rep))

    # 2) Load tables
    try:
        tables = load_tables(args.answers, args.allowed)
    except (FileNotFoundError, MalformedTable) as e:
        print(f"error: cannot load word lists: {e}", file=sys.stderr)
        return 2

    try:
        solver = create_solver(args.solver)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    solver.reset(tables=tables)
    opening = None if args.opening == "auto" else args.opening

    # 3) Choose cases (deterministic sample by seed)
    cases = [tables.words[i] for i in tables.initial_candidates()]
    if args.sample and args.sample < len(cases):
        rng = random.Random(args.seed)
        cases = rng.sample(cases, args.sample)

    iterator = tqdm(cases, ncols=80, desc=solver.id, unit="game",
                    disable=args.progress == "off")

    results = []
    for ans in iterator:
        r = run_case(solver, ans, tables=tables, max_turns=MAX_TURNS, opening=opening)
        r["solver_id"] = solver.id
        results.append(r)

    # 4) Outputs
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_turns=MAX_TURNS)
    summary = summarize(results)
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlists": rep,
        "solver_id": solver.id,
        "summary": summary,
    }, str(manifest_path))

    print(f"win rate {summary['win_rate']:.3%}, mean guesses {summary['mean_guesses']}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
