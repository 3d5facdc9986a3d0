"""
Equivalence matcher - decides whether two questions ask about the same property.

Layers run in a fixed order and the first decisive one wins:
exact, substring, exclusions, concept mappings, synonym groups,
grammatical variation, token overlap. Every layer is symmetric, so
equivalent(a, b) == equivalent(b, a).
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from .grammar import detect_variation
from .normalizer import normalize
from .rules import CONCEPT_MAPPINGS, EXCLUSION_RULES, SYNONYM_GROUPS

logger = logging.getLogger(__name__)

OVERLAP_THRESHOLD = 0.7
MIN_SHARED_TOKENS = 2


@dataclass(frozen=True)
class MatchOutcome:
    """Verdict plus the layer that decided it."""

    equivalent: bool
    step: str  # empty, exact, substring, exclusion, concept, synonym, grammar, overlap, none
    detail: str = ""


def _content(norm: str) -> set[str]:
    return {t for t in norm.split() if len(t) > 2}


def _overlap_ratio(norm_a: str, norm_b: str) -> tuple[float, int]:
    """Shared content tokens over the smaller set, plus the shared count."""
    tokens_a, tokens_b = _content(norm_a), _content(norm_b)
    if not tokens_a or not tokens_b:
        return 0.0, 0
    shared = len(tokens_a & tokens_b)
    return shared / min(len(tokens_a), len(tokens_b)), shared


def explain(q1: str, q2: str) -> MatchOutcome:
    """Run the matching layers and report which one decided."""
    norm_a, norm_b = normalize(q1), normalize(q2)

    # empty text matches nothing; the orchestrator reports it as vague
    if not norm_a or not norm_b:
        return MatchOutcome(False, "empty")

    if norm_a == norm_b:
        return MatchOutcome(True, "exact", norm_a)

    # whole-token containment so "male" never matches inside "female"
    padded_a, padded_b = f" {norm_a} ", f" {norm_b} "
    if padded_a in padded_b or padded_b in padded_a:
        return MatchOutcome(True, "substring", f"'{norm_a}' / '{norm_b}'")

    # exclusions take precedence over concept and synonym matches
    for rule in EXCLUSION_RULES:
        if rule.blocks(norm_a, norm_b):
            return MatchOutcome(False, "exclusion", f"{rule.name}: {rule.reason}")

    for mapping in CONCEPT_MAPPINGS:
        if mapping.links(norm_a, norm_b):
            return MatchOutcome(True, "concept", mapping.name)

    words_a, words_b = set(norm_a.split()), set(norm_b.split())
    for group in SYNONYM_GROUPS:
        if group.shares_concept(words_a, words_b):
            return MatchOutcome(True, "synonym", group.name)

    grammar = detect_variation(norm_a, norm_b)
    if grammar is not None:
        return MatchOutcome(True, "grammar", f"{grammar.kind}: {grammar.detail}")

    ratio, shared = _overlap_ratio(norm_a, norm_b)
    if ratio > OVERLAP_THRESHOLD and shared >= MIN_SHARED_TOKENS:
        return MatchOutcome(True, "overlap", f"{shared} shared tokens ({ratio:.2f})")

    return MatchOutcome(False, "none")


def equivalent(q1: str, q2: str) -> bool:
    """True if both questions ask about the same underlying property."""
    return explain(q1, q2).equivalent


def similarity(q1: str, q2: str) -> float:
    """Jaccard similarity of content tokens. Used to spot near misses, not to decide."""
    tokens_a, tokens_b = _content(normalize(q1)), _content(normalize(q2))
    if not tokens_a or not tokens_b:
        return 0.0
    return len(tokens_a & tokens_b) / len(tokens_a | tokens_b)


def find_duplicate(
    question: str, history: Iterable[str]
) -> Optional[tuple[str, MatchOutcome]]:
    """First prior question equivalent to `question`, with the deciding layer."""
    for previous in history:
        outcome = explain(question, previous)
        if outcome.equivalent:
            logger.debug(
                f"duplicate via {outcome.step}: '{question}' ~ '{previous}' ({outcome.detail})"
            )
            return previous, outcome
    return None


__all__ = [
    "OVERLAP_THRESHOLD",
    "MatchOutcome",
    "explain",
    "equivalent",
    "similarity",
    "find_duplicate",
]
