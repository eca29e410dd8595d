from .scoring import Feedback, score
from .constraints import GuessRecord, filter_candidates, is_consistent
from .validation import validate_code
from .codespace import enumerate_codes, make_alphabet
from .config import SolverConfig
from .session import Session

__all__ = [
    "Feedback", "score", "GuessRecord", "filter_candidates", "is_consistent",
    "validate_code", "enumerate_codes", "make_alphabet", "SolverConfig", "Session",
]
