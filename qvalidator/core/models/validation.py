"""
Pydantic models for validation verdicts: issues, results, and confirmed facts.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from .category import StrEnum


class IssueType(StrEnum):
    SemanticDuplicate = "semantic_duplicate"
    CategoryContamination = "category_contamination"
    VagueQuestion = "vague_question"
    GrammarVariation = "grammar_variation"
    LogicalRedundancy = "logical_redundancy"


class Severity(StrEnum):
    Critical = "critical"
    Warning = "warning"


class Issue(BaseModel):
    """A single problem found with a candidate question."""

    type: IssueType
    severity: Severity
    description: str
    conflicts_with: Optional[str] = None  # prior question or rule id

    @property
    def is_critical(self) -> bool:
        return self.severity == Severity.Critical


class ValidationResult(BaseModel):
    """Verdict for one candidate question. Issues keep detection order."""

    is_valid: bool
    issues: List[Issue] = Field(default_factory=list)
    confidence: float
    suggested_alternative: Optional[str] = None

    @field_validator("confidence")
    @classmethod
    def validate_confidence(cls, v: float) -> float:
        if not 0.0 <= v <= 1.0:
            raise ValueError(f"confidence must be between 0.0 and 1.0, got {v}")
        return v

    def issues_of(self, issue_type: IssueType) -> List[Issue]:
        return [i for i in self.issues if i.type == issue_type]


class ConfirmedFact(BaseModel):
    """A question already answered during the game, e.g. ("Is it a mammal?", "yes")."""

    question: str
    answer: str

    @property
    def is_yes(self) -> bool:
        return self.answer.strip().lower() in ("yes", "y", "true")


__all__ = ["IssueType", "Severity", "Issue", "ValidationResult", "ConfirmedFact"]
