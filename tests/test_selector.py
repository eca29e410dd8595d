import pytest
from mastermind.evolution import choose_next_guess, split_count
from mastermind.evolution import selector


def test_single_member_needs_no_scoring(monkeypatch):
    def boom(*_):
        raise AssertionError("score() should not be called")
    monkeypatch.setattr(selector, "score", boom)
    assert choose_next_guess(["ABCD"]) == "ABCD"

def test_split_counts_hand_computed():
    eligible = ["AB", "BA", "AA"]
    assert split_count("AA", eligible) == 2
    assert split_count("AB", eligible) == 1
    assert split_count("BA", eligible) == 1
    assert choose_next_guess(eligible) == "AA"

def test_ties_keep_first():
    assert choose_next_guess(["AAAA", "BBBB"]) == "AAAA"
    assert choose_next_guess(["BBBB", "AAAA"]) == "BBBB"

def test_empty_set_rejected():
    with pytest.raises(ValueError):
        choose_next_guess([])
