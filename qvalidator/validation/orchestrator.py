"""
QuestionValidator - runs the validation pipeline for candidate questions.

Deterministic layers run first (vague checks, contamination, duplicates,
deduction warnings, tense shift). The optional similarity arbiter is only
consulted for borderline questions and never fails the call.
"""

import asyncio
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional, Union

from ..core.config import settings
from ..core.models.category import Category
from ..core.models.validation import Issue, IssueType, Severity, ValidationResult
from ..llm.arbiter import SimilarityArbiter
from .contamination import contaminates
from .equivalence import find_duplicate, similarity
from .grammar import detect_tense_shift
from .normalizer import normalize
from .redundancy import check_logical_redundancy

logger = logging.getLogger(__name__)

CRITICAL_PENALTY = 0.3
WARNING_PENALTY = 0.1

YES_NO_OPENERS = frozenset({
    "is", "are", "was", "were", "do", "does", "did", "can", "could", "will",
    "would", "has", "have", "had", "should", "shall", "may", "might", "must",
})

VAGUE_TERMS = frozenset({
    "something", "thing", "things", "stuff", "anything", "everything", "special",
    "interesting", "good", "bad", "normal", "regular", "whatever",
})

_ALTERNATIVES = re.compile(r"\bor\b")
_FIRST_WORD = re.compile(r"[a-z]+")


def score_confidence(issues: list[Issue]) -> float:
    """1.0 minus 0.3 per critical and 0.1 per warning, clamped to [0, 1]."""
    score = 1.0
    for issue in issues:
        score -= CRITICAL_PENALTY if issue.is_critical else WARNING_PENALTY
    return max(0.0, min(1.0, score))


def _vague(description: str) -> Issue:
    return Issue(type=IssueType.VagueQuestion, severity=Severity.Critical, description=description)


def check_vague(question: Optional[str]) -> Optional[Issue]:
    """Well-formedness gate. Returns the first failing check as a critical issue."""
    if not question or not question.strip():
        return _vague("Question is empty")

    text = question.strip()
    lowered = text.lower()

    if not text.endswith("?"):
        return _vague("Question must end with a question mark")

    first = _FIRST_WORD.match(lowered)
    if first is None or first.group(0) not in YES_NO_OPENERS:
        return _vague("Question must start with a yes/no opener such as 'Is', 'Does' or 'Can'")

    if _ALTERNATIVES.search(lowered):
        return _vague("Question offers alternatives joined by 'or' and cannot be answered yes or no")

    norm = normalize(text)
    if not norm:
        return _vague("Question has no content beyond filler words")

    if all(token in VAGUE_TERMS for token in norm.split()):
        return _vague("Question is too vague to narrow anything down")

    return None


@dataclass
class ValidationStats:
    """Aggregate counts over a list of results. Reporting only."""

    total_questions: int
    valid_questions: int
    invalid_questions: int
    by_issue_type: dict[str, int] = field(default_factory=dict)
    average_confidence: float = 0.0

    @classmethod
    def compute(cls, results: list[ValidationResult]) -> "ValidationStats":
        if not results:
            return cls(total_questions=0, valid_questions=0, invalid_questions=0)

        by_type: dict[str, int] = {}
        for result in results:
            # counted once per result, however many issues of that type it has
            for issue_type in {i.type.value for i in result.issues}:
                by_type[issue_type] = by_type.get(issue_type, 0) + 1

        valid = sum(1 for r in results if r.is_valid)
        return cls(
            total_questions=len(results),
            valid_questions=valid,
            invalid_questions=len(results) - valid,
            by_issue_type=by_type,
            average_confidence=sum(r.confidence for r in results) / len(results),
        )


def _category_label(category: Union[str, Category]) -> str:
    return category.value if isinstance(category, Category) else str(category)


class QuestionValidator:
    """
    Validates candidate yes/no questions against history and category.

    Stateless between calls; safe to share across concurrent requests.
    """

    def __init__(self, arbiter: Optional[SimilarityArbiter] = None):
        self.arbiter = arbiter

    def validate_deterministic(
        self,
        question: str,
        previous_questions: Optional[list[str]] = None,
        category: Union[str, Category] = Category.Unknown,
        confirmed_facts: Any = None,
    ) -> ValidationResult:
        """Pattern layers only. Never touches the network."""
        history = list(previous_questions or [])

        vague = check_vague(question)
        if vague is not None:
            return ValidationResult(is_valid=False, issues=[vague], confidence=score_confidence([vague]))

        issues: list[Issue] = []

        contamination = contaminates(question, category)
        if contamination is not None:
            issues.append(contamination)

        duplicate = find_duplicate(question, history)
        if duplicate is not None:
            previous, outcome = duplicate
            issues.append(
                Issue(
                    type=IssueType.SemanticDuplicate,
                    severity=Severity.Critical,
                    description=f"Asks the same thing as \"{previous}\" ({outcome.step} match)",
                    conflicts_with=previous,
                )
            )

        issues.extend(check_logical_redundancy(question, confirmed_facts))

        if duplicate is None:
            shifted = self._find_tense_shift(question, history)
            if shifted is not None:
                issues.append(
                    Issue(
                        type=IssueType.GrammarVariation,
                        severity=Severity.Warning,
                        description=f"Same property as \"{shifted}\" asked in a different tense",
                        conflicts_with=shifted,
                    )
                )

        return self._build_result(issues)

    async def validate_question(
        self,
        question: str,
        previous_questions: Optional[list[str]] = None,
        category: Union[str, Category] = Category.Unknown,
        confirmed_facts: Any = None,
    ) -> ValidationResult:
        """Full pipeline: deterministic layers, then arbitration for borderline questions."""
        history = list(previous_questions or [])
        result = self.validate_deterministic(question, history, category, confirmed_facts)

        if not self._should_arbitrate(question, history, result):
            return result

        try:
            judgment = await asyncio.wait_for(
                self.arbiter.judge(question, history, _category_label(category)),
                timeout=settings.arbitration_timeout_seconds,
            )
        except asyncio.TimeoutError:
            logger.warning(
                f"similarity arbitration timed out after {settings.arbitration_timeout_seconds}s, "
                f"using pattern verdict for '{question}'"
            )
            return result
        except Exception as e:
            logger.warning(f"similarity arbitration failed, using pattern verdict: {e}")
            return result

        if not judgment.is_similar:
            return result

        issues = list(result.issues)
        issues.append(
            Issue(
                type=IssueType.SemanticDuplicate,
                severity=Severity.Warning,
                description=judgment.reasoning,
            )
        )
        return self._build_result(issues, suggested_alternative=judgment.suggested_alternative)

    async def batch_validate_questions(
        self,
        questions: Iterable[str],
        previous_questions: Optional[list[str]] = None,
        category: Union[str, Category] = Category.Unknown,
        confirmed_facts: Any = None,
        cumulative: bool = False,
    ) -> list[ValidationResult]:
        """
        One result per candidate, in input order.

        By default every candidate is checked against the same history. With
        cumulative=True candidates run in order and each valid one joins the
        history for the ones after it.
        """
        questions = list(questions)
        history = list(previous_questions or [])

        if not cumulative:
            return list(
                await asyncio.gather(
                    *(self.validate_question(q, history, category, confirmed_facts) for q in questions)
                )
            )

        results = []
        for q in questions:
            result = await self.validate_question(q, history, category, confirmed_facts)
            results.append(result)
            if result.is_valid:
                history.append(q)
        return results

    @staticmethod
    def get_validation_stats(results: list[ValidationResult]) -> ValidationStats:
        return ValidationStats.compute(results)

    def _should_arbitrate(self, question: str, history: list[str], result: ValidationResult) -> bool:
        if self.arbiter is None or not history:
            return False
        if any(i.is_critical for i in result.issues):
            return False
        return self._pattern_confidence(question, history, result) < settings.arbitration_cutoff

    @staticmethod
    def _pattern_confidence(question: str, history: list[str], result: ValidationResult) -> float:
        nearest = max((similarity(question, previous) for previous in history), default=0.0)
        return min(result.confidence, 1.0 - nearest)

    @staticmethod
    def _find_tense_shift(question: str, history: list[str]) -> Optional[str]:
        norm = normalize(question)
        for previous in history:
            if detect_tense_shift(norm, normalize(previous)):
                return previous
        return None

    @staticmethod
    def _build_result(issues: list[Issue], suggested_alternative: Optional[str] = None) -> ValidationResult:
        return ValidationResult(
            is_valid=not any(i.is_critical for i in issues),
            issues=issues,
            confidence=score_confidence(issues),
            suggested_alternative=suggested_alternative,
        )


__all__ = [
    "QuestionValidator",
    "ValidationStats",
    "check_vague",
    "score_confidence",
    "YES_NO_OPENERS",
    "VAGUE_TERMS",
]
