from pathlib import Path
from mastermind.datasets import pretty_summary, read_secrets, validate_secrets, write_secrets


def test_validate_secrets_happy_path(tmp_path: Path):
    p = write_secrets(["ABCD", "FFAA", "CEBD"], tmp_path / "secrets.txt")
    rep = validate_secrets(p, alphabet_size=6, code_length=4)
    assert rep["passed"] is True
    assert rep["count"] == 3 and rep["unique_count"] == 3
    s = pretty_summary(rep)
    assert "N=4" in s and "alphabet=ABCDEF" in s and s.endswith("OK")
    assert read_secrets(p) == ["ABCD", "FFAA", "CEBD"]


def test_validate_secrets_flags_errors(tmp_path: Path):
    p = tmp_path / "secrets.txt"
    # 'ABC' too short, 'ABCG' outside the alphabet, blank line, one duplicate
    p.write_text("ABCD\nABC\nABCG\n\nABCD\n", encoding="utf-8")
    rep = validate_secrets(str(p), alphabet_size=6, code_length=4)
    assert rep["passed"] is False
    assert rep["invalid_lines"] == 3
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_secrets_missing_file(tmp_path: Path):
    rep = validate_secrets(str(tmp_path / "nope.txt"))
    assert rep["passed"] is False and rep["exists"] is False
    assert "FAIL" in pretty_summary(rep)
