"""Shared data model for the validation engine."""

from .category import (
    Category,
    META_ANIMALS,
    META_OBJECTS,
    META_PEOPLE,
    PERSON_CATEGORIES,
    StrEnum,
    meta_category,
)
from .validation import ConfirmedFact, Issue, IssueType, Severity, ValidationResult

__all__ = [
    "Category",
    "META_ANIMALS",
    "META_OBJECTS",
    "META_PEOPLE",
    "PERSON_CATEGORIES",
    "StrEnum",
    "meta_category",
    "ConfirmedFact",
    "Issue",
    "IssueType",
    "Severity",
    "ValidationResult",
]
