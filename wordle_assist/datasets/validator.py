"""
Word-list validator.

Checks the pair of files the assistant loads at startup:
  - answers file : possible secret words (become the answer mask)
  - allowed file : legal guesses (become the guess table)

Rules per file: one word per line, lowercase a-z, exactly 5 letters, no
blank lines, no duplicates. Across files: answers should be a subset of
allowed (the loader tolerates violations by appending, the validator
reports them).

The report is a plain JSON-serializable dict so the batch runner can embed it
in its manifest unchanged.

Typical use:
    from wordle_assist.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists("data/answers_5.txt", "data/allowed_5.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple

from wordle_assist.config import WORD_LEN
from wordle_assist.engine.codec import is_valid_word


@dataclass
class FileReport:
    """Per-file diagnostics."""
    path: str
    exists: bool
    count: int = 0               # valid lines
    unique_count: int = 0        # distinct valid words
    invalid_lines: int = 0
    first_invalid: List[str] = field(default_factory=list)  # up to 5 offending lines, for debugging
    sha256: str = ""             # of the raw bytes; empty if missing


@dataclass
class ValidationReport:
    word_len: int
    answers: FileReport
    allowed: FileReport
    answers_subset_allowed: bool
    passed: bool
    issues: List[str]


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _scan(path: Path) -> Tuple[FileReport, List[str]]:
    """Read one list; returns its report and the valid words (in file order)."""
    if not path.exists():
        return FileReport(str(path), exists=False), []

    rep = FileReport(str(path), exists=True, sha256=_sha256_file(path))
    words: List[str] = []
    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            # must already be canonical: lowercase, a-z, right length
            if w and w == w.lower() and is_valid_word(w):
                words.append(w)
            else:
                rep.invalid_lines += 1
                if len(rep.first_invalid) < 5:
                    rep.first_invalid.append(raw.rstrip("\r\n"))
    rep.count = len(words)
    rep.unique_count = len(set(words))
    return rep, words


def validate_wordlists(answers_path: str, allowed_path: str) -> Dict:
    """
    Validate the answers/allowed lists.

    Returns a dict (ValidationReport schema). `passed` is strict: both files
    present and non-empty, no invalid lines, no duplicates, answers ⊆ allowed.
    """
    issues: List[str] = []
    ans_rep, answers = _scan(Path(answers_path))
    all_rep, allowed = _scan(Path(allowed_path))

    for label, rep in (("answers", ans_rep), ("allowed", all_rep)):
        if not rep.exists:
            issues.append(f"{label} file not found: {rep.path}")
            continue
        if rep.count == 0:
            issues.append(f"{label} file contains 0 valid words")
        if rep.invalid_lines:
            issues.append(f"{label} has {rep.invalid_lines} invalid line(s), e.g. {rep.first_invalid}")
        if rep.count != rep.unique_count:
            issues.append(f"{label} contains duplicate lines")

    missing = sorted(set(answers) - set(allowed))
    subset_ok = ans_rep.exists and all_rep.exists and not missing
    if missing:
        issues.append(f"answers not subset of allowed (e.g., {missing[:5]})")

    rep = ValidationReport(
        word_len=WORD_LEN,
        answers=ans_rep,
        allowed=all_rep,
        answers_subset_allowed=subset_ok,
        passed=not issues,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    One line for the console, e.g.
        answers=2315 (uniq=2315, sha=abc123...) | allowed=12972 (uniq=12972, sha=def456...) | answers⊆allowed=True | OK
    """
    a = report["answers"]
    b = report["allowed"]
    status = "OK" if report["passed"] else "FAIL"
    return (
        f"answers={a['count']} (uniq={a['unique_count']}, sha={a['sha256'][:12]}) "
        f"| allowed={b['count']} (uniq={b['unique_count']}, sha={b['sha256'][:12]}) "
        f"| answers⊆allowed={report['answers_subset_allowed']} | {status}"
    )
