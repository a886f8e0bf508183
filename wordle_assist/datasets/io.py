from __future__ import annotations
from pathlib import Path
from typing import List


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 word list into raw lines (CR/LF stripped, nothing else touched).
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def read_words(p: Path | str) -> List[str]:
    """Word list as the engine wants it: stripped, lowercased, blanks dropped, order kept."""
    return [w.strip().lower() for w in read_lines(p) if w.strip()]

