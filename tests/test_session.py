import threading

import pytest

from wordle_assist.engine import GameOver, InvalidFeedback, InvalidWord, SessionBusy, pattern_code
from wordle_assist.session import Active, CandidateSetManager, Solved, Unsolvable
from wordle_assist.solvers.hybrid import HybridSolver

from conftest import ANSWERS


def test_initial_state_uses_opening(small_tables):
    mgr = CandidateSetManager(small_tables, opening="soare")
    st = mgr.state
    assert isinstance(st, Active)
    assert st.guess == "soare"
    assert st.candidates == small_tables.initial_candidates()
    assert st.count == len(ANSWERS)


def test_initial_state_without_opening_computes_guess(small_tables):
    mgr = CandidateSetManager(small_tables, opening=None)
    assert isinstance(mgr.state, Active)
    assert mgr.state.guess in small_tables


def test_unknown_opening_falls_back_to_selection(small_tables):
    a = CandidateSetManager(small_tables, opening="qqqqq")
    b = CandidateSetManager(small_tables, opening=None)
    assert a.state == b.state


@pytest.mark.parametrize("secret", ["level", "crane", "scoop", "speed", "alone"])
def test_end_to_end_solves_with_shrinking_candidates(small_tables, secret):
    mgr = CandidateSetManager(small_tables, opening="soare")
    sizes = [mgr.state.count]
    rounds = 0
    while isinstance(mgr.state, Active):
        guess = mgr.state.guess
        rounds += 1
        assert rounds <= 6
        st = mgr.submit(pattern_code(guess, secret))
        sizes.append(st.count)
        if isinstance(st, Solved):
            break
    assert isinstance(mgr.state, Solved)
    assert mgr.state.word == secret
    assert all(a > b for a, b in zip(sizes, sizes[1:]))


def test_all_green_feedback_solves_immediately(small_tables):
    mgr = CandidateSetManager(small_tables, opening="crane")
    st = mgr.submit("GGGGG")
    assert st == Solved(small_tables.index_of("crane"), "crane")
    assert mgr.is_over


def test_all_green_on_eliminated_word_is_unsolvable(small_tables):
    mgr = CandidateSetManager(small_tables, opening="soare")
    mgr.submit(pattern_code("dumpy", "level"), guess="dumpy")
    scoop = small_tables.index_of("scoop")
    assert scoop not in mgr.candidates
    st = mgr.submit("GGGGG", guess="scoop")
    assert isinstance(st, Unsolvable)
    assert mgr.candidates == ()


def test_all_green_on_non_answer_is_unsolvable(small_tables):
    mgr = CandidateSetManager(small_tables, opening="soare")
    assert not small_tables.is_answer(small_tables.index_of("soare"))
    st = mgr.submit("GGGGG")
    assert isinstance(st, Unsolvable)
    assert all(small_tables.is_answer(i) for i in mgr.candidates)


def test_impossible_feedback_is_unsolvable_not_an_exception(small_tables):
    mgr = CandidateSetManager(small_tables)
    st = mgr.submit("GGGGY")
    assert isinstance(st, Unsolvable)
    assert mgr.candidates == ()
    with pytest.raises(GameOver):
        mgr.submit("-----")


def test_reset_recovers_from_terminal_states(small_tables):
    mgr = CandidateSetManager(small_tables)
    initial = mgr.state
    mgr.submit("GGGGY")
    assert mgr.reset() == initial
    mgr.submit("GGGGG", guess="crane")
    assert isinstance(mgr.state, Solved)
    assert mgr.reset() == initial


def test_submit_with_other_guess(small_tables):
    mgr = CandidateSetManager(small_tables)
    st = mgr.submit(pattern_code("lints", "lemon"), guess="LINTS")
    assert small_tables.index_of("lemon") in mgr.candidates
    assert st.count < len(ANSWERS)


def test_submit_validates_input(small_tables):
    mgr = CandidateSetManager(small_tables)
    before = mgr.state
    with pytest.raises(InvalidWord):
        mgr.submit("-----", guess="zzzzz")
    with pytest.raises(InvalidFeedback):
        mgr.submit("GGG")
    assert mgr.state == before


class _BlockingSolver(HybridSolver):
    """Hybrid solver that parks inside choose() until released."""

    def __init__(self):
        super().__init__()
        self.entered = threading.Event()
        self.release = threading.Event()
        self.armed = False

    def choose(self, candidates):
        if self.armed:
            self.entered.set()
            self.release.wait(timeout=10)
        return super().choose(candidates)


def test_concurrent_operation_is_rejected(small_tables):
    solver = _BlockingSolver()
    mgr = CandidateSetManager(small_tables, solver=solver)
    before = mgr.state
    solver.armed = True

    results = {}
    worker = threading.Thread(
        target=lambda: results.setdefault("state", mgr.submit(0, guess="dumpy")))
    worker.start()
    assert solver.entered.wait(timeout=10)

    assert mgr.busy
    assert mgr.state == before  # new state not published until scoring finishes
    with pytest.raises(SessionBusy):
        mgr.reset()
    with pytest.raises(SessionBusy):
        mgr.submit("-----")

    solver.release.set()
    worker.join(timeout=10)
    assert not mgr.busy
    assert mgr.state == results["state"]
    assert small_tables.index_of("crane") in mgr.candidates
