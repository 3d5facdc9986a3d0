"""
Core exports: models and config.

Dependencies live in core.deps and are imported from there directly,
since they pull in the validation and llm packages.
"""

# models
from .models.category import Category, meta_category
from .models.validation import ConfirmedFact, Issue, IssueType, Severity, ValidationResult

# config
from .config import ValidatorSettings, settings

__all__ = [
    # category
    "Category",
    "meta_category",
    # validation models
    "ConfirmedFact",
    "Issue",
    "IssueType",
    "Severity",
    "ValidationResult",
    # config
    "ValidatorSettings",
    "settings",
]
