"""
The two global word tables every engine call reads.

  - GuessTable : ordered legal guesses, stored both as text and as a
                 read-only (N, 5) uint8 array of letter symbols 1..26
  - AnswerMask : read-only bool array parallel to the guess table; True marks
                 a possible secret answer

Both are loaded once via `initialize` (or `WordTables.from_wordlists`) and
never mutated: the numpy buffers are flagged non-writeable, so an accidental
in-place write raises instead of silently corrupting later rounds.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence, Tuple

import numpy as np

from wordle_assist.config import WORD_LEN
from .codec import WordLike, as_vector, vec_to_word
from .errors import InvalidWord, MalformedTable, OutOfRangeIndex

log = logging.getLogger(__name__)

CandidateSet = Tuple[int, ...]


def _frozen(arr: np.ndarray) -> np.ndarray:
    arr.flags.writeable = False
    return arr


@dataclass(frozen=True, eq=False)
class WordTables:
    words: Tuple[str, ...]
    vectors: np.ndarray        # (N, 5) uint8, read-only
    answer_mask: np.ndarray    # (N,) bool, read-only
    _index: Dict[str, int] = field(init=False, repr=False)

    def __post_init__(self):
        object.__setattr__(self, "_index", {w: i for i, w in enumerate(self.words)})

    def __len__(self) -> int:
        return len(self.words)

    @property
    def num_answers(self) -> int:
        return int(self.answer_mask.sum())

    def check_index(self, idx: int) -> int:
        """Return idx as a plain int, or raise OutOfRangeIndex."""
        i = int(idx)
        if not 0 <= i < len(self.words):
            raise OutOfRangeIndex(f"index {i} outside guess table of size {len(self.words)}")
        return i

    def word(self, idx: int) -> str:
        return self.words[self.check_index(idx)]

    def is_answer(self, idx: int) -> bool:
        return bool(self.answer_mask[self.check_index(idx)])

    def index_of(self, word: str) -> int:
        """Position of `word` in the guess table; InvalidWord if it is not a legal guess."""
        w = word.strip().lower()
        try:
            return self._index[w]
        except KeyError:
            raise InvalidWord(f"not in the guess table: {word!r}") from None

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.strip().lower() in self._index

    def initial_candidates(self) -> CandidateSet:
        """Every possible answer, in guess-table order."""
        return tuple(int(i) for i in np.flatnonzero(self.answer_mask))

    def candidate_vectors(self, candidates: Sequence[int]) -> np.ndarray:
        """(len(candidates), 5) letter array for a candidate set, validating every index."""
        idx = np.asarray(candidates, dtype=np.intp).reshape(-1)
        if idx.size and (idx.min() < 0 or idx.max() >= len(self.words)):
            bad = idx[(idx < 0) | (idx >= len(self.words))][0]
            raise OutOfRangeIndex(f"index {int(bad)} outside guess table of size {len(self.words)}")
        if idx.size and not self.answer_mask[idx].all():
            bad = idx[~self.answer_mask[idx]][0]
            raise ValueError(f"candidate {int(bad)} ({self.words[bad]!r}) is not a possible answer")
        return self.vectors[idx]

    @classmethod
    def from_wordlists(cls, allowed: Iterable[str], answers: Iterable[str]) -> "WordTables":
        """
        Build the tables from two word lists.

        The guess table is `allowed` in its given order (duplicates dropped),
        followed by any answers missing from it; the mask marks `answers`.
        """
        words: List[str] = []
        seen = set()
        for w in allowed:
            w = w.strip().lower()
            if w and w not in seen:
                seen.add(w)
                words.append(w)

        answer_set = set()
        missing = 0
        for w in answers:
            w = w.strip().lower()
            if not w:
                continue
            answer_set.add(w)
            if w not in seen:
                seen.add(w)
                words.append(w)
                missing += 1
        if missing:
            log.warning("%d answer(s) missing from the allowed list were appended to it", missing)

        mask = [w in answer_set for w in words]
        return initialize(words, mask)


def initialize(guess_table: Sequence[WordLike], answer_mask: Sequence[bool]) -> WordTables:
    """
    Validate and freeze the global tables.

    Args:
      guess_table : words as text ("crane") or 5-symbol vectors (1..26)
      answer_mask : same length as guess_table; truthy == possible answer

    Raises:
      MalformedTable if any entry is not a 5-letter word, the lengths differ,
      an entry repeats, or no entry is marked as an answer.
    """
    if len(answer_mask) != len(guess_table):
        raise MalformedTable(
            f"answer mask has {len(answer_mask)} entries, guess table has {len(guess_table)}")
    if len(guess_table) == 0:
        raise MalformedTable("guess table is empty")

    vecs: List[Tuple[int, ...]] = []
    for i, entry in enumerate(guess_table):
        try:
            vecs.append(as_vector(entry))
        except InvalidWord as e:
            raise MalformedTable(f"entry {i}: {e}") from e

    words = tuple(vec_to_word(v) for v in vecs)
    if len(set(words)) != len(words):
        raise MalformedTable("guess table contains duplicate words")

    mask = np.array([bool(m) for m in answer_mask], dtype=bool)
    if not mask.any():
        raise MalformedTable("answer mask marks no possible answers")

    vectors = np.array(vecs, dtype=np.uint8).reshape(len(words), WORD_LEN)
    tables = WordTables(words=words, vectors=_frozen(vectors), answer_mask=_frozen(mask))
    log.info("initialized tables: %d guesses, %d possible answers", len(tables), tables.num_answers)
    return tables
