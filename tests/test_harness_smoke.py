import csv
import json
import pytest
from mastermind.engine import SolverConfig, score
from mastermind.engine.errors import EmptyEligibleSet
from mastermind.harness import run_batch, run_case, summarize, pretty_stats, write_csv, write_manifest
from mastermind.solvers import create_solver
from mastermind.solvers.base import BaseSolver

# smaller eligible cap keeps the pairwise selector cheap in tests
FAST = SolverConfig(eligible_cap=15)


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_genetic_solves_abcd(seed):
    solver = create_solver("genetic")
    r = run_case(solver, "ABCD", config=FAST, max_turns=10, seed=seed)
    assert r["success"] is True and r["outcome"] == "win"
    assert r["guesses"] <= 10
    assert r["history"][-1].guess == "ABCD"
    for guess, fb in r["history"]:
        assert fb == score(guess, "ABCD")

def test_random_consistent_batch():
    solver = create_solver("random_consistent")
    results = run_batch(solver, ["ABCD", "FFAA", "CEBD"], config=FAST, seed=7)
    assert all(r["success"] for r in results)
    stats = summarize(results)
    assert stats["games"] == 3 and stats["wins"] == 3 and stats["win_rate"] == 1.0
    assert 1 <= stats["mean_guesses"] <= stats["max_guesses"] <= 10
    assert "games=3" in pretty_stats(stats)

class _GivesUp(BaseSolver):
    id = "gives_up"

    def next_guess(self, state):
        if state["history"]:
            raise EmptyEligibleSet("nothing left")
        return "AAAA"

def test_empty_eligible_set_is_a_loss():
    r = run_case(_GivesUp(), "ABCD", seed=0)
    assert r["success"] is False and r["outcome"] == "no_candidates"
    assert r["guesses"] == 1 and r["secret"] == "ABCD"

def test_turn_limit():
    class _Stubborn(BaseSolver):
        id = "stubborn"

        def next_guess(self, state):
            return "FFFF"

    r = run_case(_Stubborn(), "ABCD", max_turns=3)
    assert r["outcome"] == "turn_limit" and r["guesses"] == 3
    with pytest.raises(ValueError):
        run_case(_Stubborn(), "ABCD", max_turns=0)

def test_summarize_without_wins():
    stats = summarize([{"success": False, "guesses": 10, "time_ms": 5.0}])
    assert stats["wins"] == 0 and stats["mean_guesses"] is None
    assert "guesses n/a" in pretty_stats(stats)

def test_write_outputs(tmp_path):
    r = run_case(create_solver("random_consistent"), "ABCD", config=FAST, seed=5)
    r["solver_id"] = "random_consistent"
    out = write_csv([r], str(tmp_path / "run.csv"), max_turns=10, N=4)
    with open(out, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert rows[0]["secret"] == "ABCD" and rows[0]["solver"] == "random_consistent"
    g, fb = r["history"][0]
    assert rows[0]["guess_1"] == g and rows[0]["fb_1"] == f"'{fb.exact}-{fb.partial}"
    assert rows[0]["guess_10"] == ""

    m = write_manifest({"run_id": "x", "stats": summarize([r])}, str(tmp_path / "m.json"))
    assert json.loads((tmp_path / "m.json").read_text(encoding="utf-8"))["run_id"] == "x"
    assert m.endswith("m.json")

def test_run_metadata():
    from mastermind.harness.io import git_commit_or_unknown, timestamp_id
    rid = timestamp_id()
    assert len(rid) == 16 and rid[8] == "T" and rid.endswith("Z")
    assert isinstance(git_commit_or_unknown(), str)
