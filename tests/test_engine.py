import pytest
from mastermind.engine import (Feedback, GuessRecord, enumerate_codes, filter_candidates,
                               is_consistent, make_alphabet, score, validate_code)
from mastermind.engine.errors import InvalidCode
from mastermind.engine.validation import require_code

# --- N=4, 6 symbols: golden tests (repeats + placements) ---
@pytest.mark.parametrize("guess,reference,expected", [
    ("ABCD", "AEFB", (1, 1)),
    ("AABB", "ABCD", (1, 1)),
    ("ABCD", "ABCD", (4, 0)),
    ("ABCD", "DCBA", (0, 4)),
    ("AAAA", "ABCD", (1, 0)),
    ("ABCD", "AAAA", (1, 0)),
    ("AABB", "BBAA", (0, 4)),
    ("AABC", "ABAD", (1, 2)),
    ("ABBB", "BBBA", (2, 2)),
    ("EEFF", "ABCD", (0, 0)),
])
def test_score_golden(guess, reference, expected):
    assert score(guess, reference) == expected

def test_score_returns_named_feedback():
    fb = score("ABCD", "AEFB")
    assert fb.exact == 1 and fb.partial == 1
    assert str(fb) == "1-1"

def test_score_properties_small_space():
    codes = enumerate_codes("ABC", 3)
    for a in codes:
        assert score(a, a) == (3, 0)
        for b in codes:
            fb = score(a, b)
            assert fb.exact + fb.partial <= 3
            assert fb == score(b, a)

def test_enumerate_codes_order_and_size():
    assert enumerate_codes("AB", 2) == ("AA", "AB", "BA", "BB")
    space = enumerate_codes(make_alphabet(6), 4)
    assert len(space) == 6 ** 4 == len(set(space))
    assert space[0] == "AAAA" and space[-1] == "FFFF"
    # cached for the process lifetime
    assert enumerate_codes(make_alphabet(6), 4) is space

def test_make_alphabet_bounds():
    assert make_alphabet(6) == "ABCDEF"
    with pytest.raises(ValueError):
        make_alphabet(0)

def test_filter_candidates_history():
    history = [GuessRecord("AABB", Feedback(1, 1))]
    cand = filter_candidates(enumerate_codes("ABCDEF", 4), history)
    assert "ABCD" in cand and "AABB" not in cand and "CDEF" not in cand
    assert all(is_consistent(c, history) for c in cand)

def test_validate_code():
    assert validate_code("ABCD", "ABCDEF", N=4) is True
    assert validate_code("ABCG", "ABCDEF", N=4) is False
    assert validate_code("ABC", "ABCDEF", N=4) is False
    assert validate_code(1234, "ABCDEF", N=4) is False
    with pytest.raises(InvalidCode):
        require_code("abcd", "ABCDEF", 4)
