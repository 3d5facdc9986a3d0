"""
API Request/Response schemas using Pydantic.
"""

from typing import Optional

from pydantic import BaseModel, Field

from ..core.models.validation import ConfirmedFact, ValidationResult


# ============ Validation Schemas ============

class ValidateQuestionRequest(BaseModel):
    """Request to validate one candidate question.

    An empty question is accepted here and reported as vague, not rejected.
    """
    question: str = Field(..., max_length=500)
    previous_questions: list[str] = Field(default_factory=list)
    category: str = Field("unknown", max_length=100)
    confirmed_facts: list[ConfirmedFact] = Field(default_factory=list)


class BatchValidateRequest(BaseModel):
    """Request to validate several candidates against one history."""
    questions: list[str] = Field(..., min_length=1)
    previous_questions: list[str] = Field(default_factory=list)
    category: str = Field("unknown", max_length=100)
    confirmed_facts: list[ConfirmedFact] = Field(default_factory=list)
    cumulative: bool = False


class StatsRequest(BaseModel):
    """Results to aggregate."""
    results: list[ValidationResult]


class ValidationStatsResponse(BaseModel):
    """Counts over a list of results."""
    total_questions: int
    valid_questions: int
    invalid_questions: int
    by_issue_type: dict[str, int]
    average_confidence: float


class BatchValidateResponse(BaseModel):
    """One result per candidate plus the aggregate."""
    results: list[ValidationResult]
    stats: ValidationStatsResponse


# ============ Category Schemas ============

class CategoryInfo(BaseModel):
    """A playable category and the rule family it uses."""
    name: str
    meta_category: Optional[str]
    appropriate_examples: list[str]
    blocked_examples: list[str]


__all__ = [
    "ValidateQuestionRequest",
    "BatchValidateRequest",
    "StatsRequest",
    "ValidationStatsResponse",
    "BatchValidateResponse",
    "CategoryInfo",
]
