"""
I/O utilities for simulation runs.

- write_csv:      one row per game (guesses, patterns, candidate counts)
- write_manifest: JSON with config, word-list report and metadata
- timestamp_id:   UTC run id for file names
- git_commit_or_unknown: short commit hash for reproducibility

Patterns are prefixed with an apostrophe so spreadsheet apps keep strings
like "-GYY-" as text instead of parsing them as formulas.
"""

from __future__ import annotations

import csv
import datetime as dt
import json
import subprocess
from pathlib import Path
from typing import Dict, List


def _excel_safe_pattern(patt: str) -> str:
    return "'" + patt if patt else patt


def write_csv(results: List[Dict], path: str, max_turns: int) -> str:
    """
    Serialize a batch of game results.

    Columns:
      solver, answer, success, guesses, time_ms,
      guess_1, patt_1, cands_1, ..., guess_<max_turns>, patt_<max_turns>, cands_<max_turns>

    cands_i is the candidate count guess_i was chosen from.
    Returns the path written.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["solver", "answer", "success", "guesses", "time_ms"]
    for i in range(1, max_turns + 1):
        fields += [f"guess_{i}", f"patt_{i}", f"cands_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()
        for r in results:
            row = {
                "solver": r.get("solver_id", "?"),
                "answer": r["answer"],
                "success": r["success"],
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
            }
            hist = r.get("history", [])
            counts = r.get("candidates", [])
            for i in range(max_turns):
                g, patt = hist[i] if i < len(hist) else ("", "")
                row[f"guess_{i + 1}"] = g
                row[f"patt_{i + 1}"] = _excel_safe_pattern(patt)
                row[f"cands_{i + 1}"] = counts[i] if i < len(counts) else ""
            w.writerow(row)

    return str(p)


def summarize(results: List[Dict]) -> Dict:
    """Win rate and guess statistics for a batch (wins only for the mean)."""
    n = len(results)
    wins = [r["guesses"] for r in results if r["success"]]
    dist: Dict[str, int] = {}
    for g in wins:
        dist[str(g)] = dist.get(str(g), 0) + 1
    return {
        "games": n,
        "wins": len(wins),
        "win_rate": (len(wins) / n) if n else 0.0,
        "mean_guesses": (sum(wins) / len(wins)) if wins else None,
        "max_guesses": max(wins) if wins else None,
        "distribution": dict(sorted(dist.items())),
        "unsolvable": sum(1 for r in results if r.get("unsolvable")),
    }


def write_manifest(manifest: Dict, path: str) -> str:
    """Write the run manifest as indented JSON; returns the path."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """Compact UTC timestamp, e.g. 20250820T024121Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """Short git hash of HEAD, or 'unknown' outside a repo / without git."""
    try:
        out = subprocess.check_output(
            ["git", "rev-parse", "--short", "HEAD"],
            stderr=subprocess.DEVNULL,
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
    return out.decode().strip()
