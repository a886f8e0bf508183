"""
Word lists on disk -> WordTables.

The guess table is the allowed list in file order (answers missing from it
are appended), and the answer mask marks the answers list. File order is
therefore part of the engine's output: the final tie-break picks the lowest
guess-table index.
"""

from __future__ import annotations

import logging
from pathlib import Path

from wordle_assist.engine.tables import WordTables
from .io import read_words

log = logging.getLogger(__name__)


def load_tables(answers_path: Path | str, allowed_path: Path | str) -> WordTables:
    """
    Read both lists and build the immutable tables.

    Raises:
      FileNotFoundError if either file is missing
      MalformedTable    if any word is not 5 letters a-z, or there are no answers
    """
    answers = read_words(answers_path)
    allowed = read_words(allowed_path)
    log.info("read %d answers from %s, %d allowed from %s",
             len(answers), answers_path, len(allowed), allowed_path)
    return WordTables.from_wordlists(allowed, answers)
