from __future__ import annotations
from pathlib import Path
from typing import Iterable, List


def read_secrets(p: Path | str) -> List[str]:
    """
    Read a secrets file: one code per line, surrounding whitespace and blank
    lines dropped, file order kept.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.strip() for ln in p.read_text(encoding="utf-8").splitlines() if ln.strip()]


def write_secrets(codes: Iterable[str], p: Path | str) -> str:
    """
    Write codes one per line with a trailing newline; parent dirs are created.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("".join(f"{c}\n" for c in codes), encoding="utf-8")
    return str(p)
