"""Validation engine - normalizer, rule tables, matchers and the orchestrator."""

from .normalizer import normalize
from .equivalence import MatchOutcome, equivalent, explain, find_duplicate, similarity
from .grammar import detect_tense_shift, detect_variation
from .contamination import contaminates
from .redundancy import check_logical_redundancy
from .orchestrator import QuestionValidator, ValidationStats

__all__ = [
    "normalize",
    "MatchOutcome",
    "equivalent",
    "explain",
    "find_duplicate",
    "similarity",
    "detect_tense_shift",
    "detect_variation",
    "contaminates",
    "check_logical_redundancy",
    "QuestionValidator",
    "ValidationStats",
]
