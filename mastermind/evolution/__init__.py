from .candidate import Candidate
from .population import EligibleSet, GenerationReport, Population, PopulationEngine, RoundResult
from .selector import choose_next_guess, split_count

__all__ = [
    "Candidate", "EligibleSet", "GenerationReport", "Population", "PopulationEngine",
    "RoundResult", "choose_next_guess", "split_count",
]
