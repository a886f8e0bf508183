import math

import numpy as np
import pytest

from wordle_assist.engine import Metric, compute_scores, initialize, score


@pytest.fixture
def split_tables():
    # "afkzz" puts each of the three answers in its own bucket,
    # "zzzzz" lumps them all together.
    words = ["zzzzz", "abcde", "fghij", "klmno", "afkzz"]
    mask = [False, True, True, True, False]
    return initialize(words, mask)


def test_entropy_singleton_partition_hits_log2_n_exactly():
    cands = ["abcde", "fghij", "klmno"]
    assert score("afkzz", cands, Metric.ENTROPY) == np.log2(3.0)
    assert score("afkzz", cands, Metric.MINIMAX) == 1.0


def test_entropy_no_information():
    cands = ["abcde", "fghij", "klmno"]
    assert score("zzzzz", cands, "entropy") == 0.0
    assert score("zzzzz", cands, "minimax") == 3.0


def test_entropy_matches_definition(small_tables):
    from wordle_assist.engine import simulate
    cands = [small_tables.words[i] for i in small_tables.initial_candidates()]
    n = len(cands)
    for guess in ["soare", "crane", "level", "dumpy"]:
        buckets = {}
        for c in cands:
            p = simulate(guess, c)
            buckets[p] = buckets.get(p, 0) + 1
        expected = -sum((k / n) * math.log2(k / n) for k in buckets.values())
        assert score(guess, cands, Metric.ENTROPY) == pytest.approx(expected, abs=1e-12)
        assert score(guess, cands, Metric.MINIMAX) == max(buckets.values())


def test_entropy_bound_over_whole_table(small_tables):
    cands = small_tables.initial_candidates()
    ent = compute_scores(cands, small_tables, Metric.ENTROPY)
    mm = compute_scores(cands, small_tables, Metric.MINIMAX)
    bound = np.log2(float(len(cands)))
    assert (ent <= bound).all()
    # equality only for guesses that split into singletons
    assert ((ent == bound) == (mm == 1.0)).all()


def test_compute_scores_agrees_with_single_guess_score(small_tables):
    cands = small_tables.initial_candidates()
    words = [small_tables.words[i] for i in cands]
    for metric in Metric:
        vec = compute_scores(cands, small_tables, metric, chunk=7)
        assert vec.shape == (len(small_tables),)
        for i, g in enumerate(small_tables.words):
            assert vec[i] == pytest.approx(score(g, words, metric))


def test_compute_scores_chunking_is_invisible(small_tables):
    cands = small_tables.initial_candidates()[:9]
    a = compute_scores(cands, small_tables, Metric.ENTROPY, chunk=1)
    b = compute_scores(cands, small_tables, Metric.ENTROPY, chunk=1000)
    assert np.array_equal(a, b)


def test_compute_scores_subset_of_guesses(split_tables):
    cands = split_tables.initial_candidates()
    sub = compute_scores(cands, split_tables, Metric.MINIMAX, guess_indices=[4, 0])
    assert list(sub) == [1.0, 3.0]


def test_compute_scores_returns_fresh_array(split_tables):
    cands = split_tables.initial_candidates()
    a = compute_scores(cands, split_tables, Metric.ENTROPY)
    b = compute_scores(cands, split_tables, Metric.ENTROPY)
    assert a is not b
    a[:] = -1.0
    assert (b >= 0).all()


def test_unknown_metric_and_empty_candidates(split_tables):
    with pytest.raises(ValueError):
        compute_scores(split_tables.initial_candidates(), split_tables, "average")
    with pytest.raises(ValueError):
        compute_scores((), split_tables, Metric.ENTROPY)
