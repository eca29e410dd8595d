"""
Secrets-file validator for mastermindAI.

What this module does:
- Validate a secrets file (one code per line) for a given alphabet size and
  code length.
- Enforce formatting rules (symbols from the alphabet, exact length N, no
  blank lines).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from mastermind.datasets import validate_secrets, pretty_summary
    rep = validate_secrets("data/secrets_6x4.txt", alphabet_size=6, code_length=4)
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from mastermind.engine.codespace import make_alphabet
from mastermind.engine.validation import validate_code


# -----------------------------
# Dataclass for structured reports
# -----------------------------

@dataclass
class SecretsReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    alphabet: str        # symbols allowed in a code
    N: int               # code length
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID codes
    unique_count: int    # unique valid codes (after dedupe)
    invalid_lines: int   # number of invalid lines encountered
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, alphabet: str, N: int) -> Tuple[List[str], int]:
    """
    Load codes from a text file and validate them.

    Rules:
      - one code per line (surrounding whitespace is ignored)
      - every symbol in the alphabet, exact length N
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_codes, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            code = raw.strip()
            if code and validate_code(code, alphabet, N):
                valid.append(code)
            else:
                invalid += 1

    return valid, invalid


# -----------------------------
# Public API
# -----------------------------

def validate_secrets(path: str, alphabet_size: int = 6, code_length: int = 4) -> Dict:
    """
    Validate a secrets file for the given alphabet size and code length.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see SecretsReport schema) with counts,
        SHA-256, a strict `passed` flag (non-empty, no invalid lines) and an
        `issues` list describing any problems.
    """
    alphabet = make_alphabet(alphabet_size)
    issues: List[str] = []
    p = Path(path)

    if not p.exists():
        issues.append(f"secrets file not found: {path}")
        return asdict(SecretsReport(path, alphabet, code_length, False, 0, 0, 0, "", False, issues))

    codes, invalid = _load_and_check(p, alphabet, code_length)
    unique_count = len(set(codes))

    if not codes:
        issues.append("secrets file contains 0 valid codes")
    if invalid:
        issues.append(f"secrets file has {invalid} invalid line(s)")
    if unique_count != len(codes):
        issues.append("secrets file contains duplicate codes")

    rep = SecretsReport(
        path=str(p),
        alphabet=alphabet,
        N=code_length,
        exists=True,
        count=len(codes),
        unique_count=unique_count,
        invalid_lines=invalid,
        sha256=_sha256_file(p),
        passed=bool(codes) and invalid == 0,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        N=4 | alphabet=ABCDEF | secrets=100 (uniq=97, sha=abc123...) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | alphabet={report['alphabet']} "
        f"| secrets={report['count']} (uniq={report['unique_count']}, sha={sha}) | {status}"
    )
