import csv
import json

import pytest

from wordle_assist.harness import run_batch, run_case, summarize, write_csv, write_manifest
from wordle_assist.solvers import create_solver, get_solver_ids

from conftest import ANSWERS


def _solver(sid, tables):
    s = create_solver(sid)
    s.reset(tables=tables)
    return s


def test_registry_lists_solvers():
    assert get_solver_ids() == ["entropy", "hybrid", "minimax"]
    with pytest.raises(ValueError):
        create_solver("random_consistent")


def test_solver_requires_tables():
    with pytest.raises(RuntimeError):
        create_solver("hybrid").choose((0, 1))


def test_run_case_smoke(small_tables):
    r = run_case(_solver("hybrid", small_tables), "crane", tables=small_tables, max_turns=6)
    assert r["success"] is True
    assert r["history"][-1] == ("crane", "GGGGG")
    assert r["history"][0][0] == "soare"
    assert r["guesses"] == len(r["history"]) <= 6


@pytest.mark.parametrize("sid", ["hybrid", "entropy", "minimax"])
def test_run_batch_solves_everything(small_tables, sid):
    results = run_batch(_solver(sid, small_tables), tables=small_tables)
    assert len(results) == len(ANSWERS)
    for r in results:
        assert r["success"] is True, r
        assert r["solver_id"] == sid
        counts = r["candidates"]
        assert all(a > b for a, b in zip(counts, counts[1:]))
    s = summarize(results)
    assert s["wins"] == len(ANSWERS) and s["win_rate"] == 1.0 and s["unsolvable"] == 0


def test_run_case_secret_outside_answers(small_tables):
    # a legal guess that is not a possible answer drops out of the candidate set
    r = run_case(_solver("hybrid", small_tables), "dumpy", tables=small_tables, opening="soare")
    assert r["success"] is False
    assert r["unsolvable"] is True


def test_run_case_enforces_turn_budget(small_tables):
    with pytest.raises(ValueError):
        run_case(_solver("hybrid", small_tables), "crane", tables=small_tables, max_turns=7)


def test_writers(tmp_path, small_tables):
    results = run_batch(_solver("hybrid", small_tables), tables=small_tables, sample=3)
    csv_path = write_csv(results, str(tmp_path / "out" / "run.csv"), max_turns=6)
    with open(csv_path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 3
    assert rows[0]["guess_1"] == "soare"
    assert rows[0]["patt_1"].startswith("'")
    assert rows[0]["cands_1"] == str(len(ANSWERS))

    m = write_manifest({"summary": summarize(results)}, str(tmp_path / "m.json"))
    with open(m, encoding="utf-8") as f:
        assert json.load(f)["summary"]["games"] == 3
