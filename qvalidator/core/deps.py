"""
Dependency injection for FastAPI and other components.
Provides the shared validator and config.
"""

from typing import Optional

from ..llm.arbiter import get_arbiter
from ..llm.provider import reset_llm_provider
from ..validation.orchestrator import QuestionValidator
from .config import ValidatorSettings, settings

# one validator per process; it holds no per-request state
_validator: Optional[QuestionValidator] = None


def get_validator() -> QuestionValidator:
    """Shared QuestionValidator, wired to the arbiter when one is configured."""
    global _validator
    if _validator is None:
        _validator = QuestionValidator(arbiter=get_arbiter())
    return _validator


def get_settings() -> ValidatorSettings:
    """Get global settings. Not async since it's just a singleton."""
    return settings


def reset_singletons() -> None:
    """Drop cached validator and provider. Used by tests and after config changes."""
    global _validator
    _validator = None
    reset_llm_provider()


__all__ = [
    "get_validator",
    "get_settings",
    "reset_singletons",
]
