import pytest

from wordle_assist.engine import (InvalidFeedback, OutOfRangeIndex, WordTables, filter_candidates,
                                  filter_with_count, pattern_code, replay_history)


@pytest.fixture
def crane_tables():
    words = ["crane", "raise", "stare", "trace", "cared", "racer", "scoop"]
    return WordTables.from_wordlists(words, words)


def _words(tables, idxs):
    return [tables.words[i] for i in idxs]


def test_filter_candidates_single_feedback(crane_tables):
    cands = crane_tables.initial_candidates()
    out = _words(crane_tables, filter_candidates(cands, "raise", "YY--G", crane_tables))
    assert "crane" in out and "stare" not in out and "scoop" not in out


def test_filter_preserves_order_and_returns_count(crane_tables):
    cands = crane_tables.initial_candidates()
    out, n = filter_with_count(cands, "raise", "YY--G", crane_tables)
    assert n == len(out)
    assert list(out) == sorted(out)
    assert isinstance(out, tuple)


def test_filter_never_grows_and_is_idempotent(small_tables):
    cands = small_tables.initial_candidates()
    for guess in small_tables.words:
        codes = {pattern_code(guess, small_tables.words[c]) for c in cands} | {0, 242}
        for code in codes:
            once = filter_candidates(cands, guess, code, small_tables)
            assert len(once) <= len(cands)
            assert set(once) <= set(cands)
            assert filter_candidates(once, guess, code, small_tables) == once


def test_filter_partitions_candidates(small_tables):
    cands = small_tables.initial_candidates()
    seen = []
    for code in range(243):
        seen.extend(filter_candidates(cands, "soare", code, small_tables))
    assert sorted(seen) == sorted(cands)


def test_filter_keeps_secret(small_tables):
    cands = small_tables.initial_candidates()
    for c in cands:
        secret = small_tables.words[c]
        out = filter_candidates(cands, "roate", pattern_code("roate", secret), small_tables)
        assert c in out


def test_filter_rejects_bad_input(crane_tables):
    cands = crane_tables.initial_candidates()
    with pytest.raises(InvalidFeedback):
        filter_candidates(cands, "raise", 243, crane_tables)
    with pytest.raises(OutOfRangeIndex):
        filter_candidates((0, 99), "raise", 0, crane_tables)


def test_filter_empty_set_stays_empty(crane_tables):
    assert filter_candidates((), "raise", 0, crane_tables) == ()


def test_replay_history_matches_stepwise(small_tables):
    secret = "level"
    history = [(g, pattern_code(g, secret)) for g in ("soare", "lints")]
    step = small_tables.initial_candidates()
    for g, p in history:
        step = filter_candidates(step, g, p, small_tables)
    assert replay_history(history, small_tables) == step
    assert small_tables.index_of(secret) in step


def test_replay_history_impossible_feedback_empties(small_tables):
    assert replay_history([("soare", "GGGGY")], small_tables) == ()
