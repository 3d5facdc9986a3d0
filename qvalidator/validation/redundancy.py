"""
Logical redundancy - questions whose answer already follows from confirmed facts.

Once "Is it a mammal?" got a yes, asking whether it is warm-blooded wastes a
turn. These are warnings, not blockers.
"""

import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Optional

from pydantic import ValidationError

from ..core.models.validation import ConfirmedFact, Issue, IssueType, Severity
from .category_rules import clean_question

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeductionRule:
    """A yes-answer to `trigger` settles every property in `implies`."""

    name: str
    trigger: re.Pattern
    implies: tuple[tuple[str, re.Pattern], ...]
    description: str


def _deduction(name: str, trigger: str, implies: list[tuple[str, str]], description: str) -> DeductionRule:
    return DeductionRule(
        name=name,
        trigger=re.compile(trigger),
        implies=tuple((label, re.compile(pattern)) for label, pattern in implies),
        description=description,
    )


DEDUCTION_RULES: tuple[DeductionRule, ...] = (
    _deduction(
        "mammal",
        r"\bmammals?\b",
        [
            ("warm-blooded", r"\bwarm ?blooded\b"),
            ("vertebrate", r"\bvertebrates?\b"),
            ("has fur or hair", r"\b(?:fur|furry|hair|hairy)\b"),
        ],
        "If it's a mammal, certain properties are automatically true",
    ),
    _deduction(
        "electronic",
        r"\belectronic\b",
        [
            ("uses electricity", r"\b(?:use|uses|need|needs|require|requires) electricity\b"),
            ("has circuits", r"\bcircuits?\b"),
            ("needs power", r"\b(?:need|needs|require|requires) (?:power|a power source)\b"),
        ],
        "If it's electronic, certain properties are automatically true",
    ),
    _deduction(
        "president",
        r"\bpresident\b",
        [
            ("political leader", r"\bpolitical leader\b|\bpolitician\b"),
            ("government role", r"\bgovernment (?:role|position|job)\b"),
            ("elected position", r"\belected (?:position|office)\b|\b(?:hold|held) (?:public |political )?office\b"),
        ],
        "If they were president, certain roles are automatically true",
    ),
)


def _coerce_facts(facts: Optional[Iterable[Any]]) -> list[ConfirmedFact]:
    """Accept ConfirmedFact, {"question", "answer"} mappings, or (question, answer) pairs.

    A single fact or mapping counts as a one-item list. Anything else that is
    not a collection is ignored.
    """
    if not facts:
        return []
    if isinstance(facts, (ConfirmedFact, Mapping)):
        facts = [facts]
    elif isinstance(facts, (str, bytes)) or not isinstance(facts, Iterable):
        logger.warning(f"ignoring confirmed facts that are not a collection: {facts!r}")
        return []

    coerced = []
    for fact in facts:
        try:
            if isinstance(fact, ConfirmedFact):
                coerced.append(fact)
            elif isinstance(fact, Mapping):
                coerced.append(ConfirmedFact.model_validate(fact))
            elif isinstance(fact, (tuple, list)) and len(fact) == 2:
                coerced.append(ConfirmedFact(question=fact[0], answer=fact[1]))
            else:
                logger.warning(f"ignoring confirmed fact of unsupported shape: {fact!r}")
        except ValidationError as e:
            logger.warning(f"ignoring malformed confirmed fact {fact!r}: {e}")
    return coerced


def check_logical_redundancy(question: str, facts: Optional[Iterable[Any]]) -> list[Issue]:
    """Warnings for each implied property the question asks about."""
    confirmed = [f for f in _coerce_facts(facts) if f.is_yes]
    if not confirmed:
        return []

    cleaned = clean_question(question)
    issues = []
    for rule in DEDUCTION_RULES:
        source = next((f for f in confirmed if rule.trigger.search(clean_question(f.question))), None)
        if source is None:
            continue
        for label, pattern in rule.implies:
            if pattern.search(cleaned):
                issues.append(
                    Issue(
                        type=IssueType.LogicalRedundancy,
                        severity=Severity.Warning,
                        description=f"{rule.description}: \"{label}\" can be deduced",
                        conflicts_with=source.question,
                    )
                )
    return issues


__all__ = ["DeductionRule", "DEDUCTION_RULES", "check_logical_redundancy"]
