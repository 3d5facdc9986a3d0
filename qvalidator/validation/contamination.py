"""
Contamination analyzer - flags questions that leak across category boundaries.
"""

import logging
from typing import Optional, Union

from ..core.models.category import Category
from ..core.models.validation import Issue, IssueType, Severity
from .category_rules import RuleKind, match_rule

logger = logging.getLogger(__name__)

_KIND_LABEL = {
    RuleKind.Forbidden: "does not apply",
    RuleKind.AlwaysTrue: "is always true",
    RuleKind.AlwaysFalse: "is always false",
}


def contaminates(question: str, category: Union[str, Category]) -> Optional[Issue]:
    """Critical category_contamination issue if the question trips a rule, else None."""
    parsed = Category.parse(category)
    rule = match_rule(question, parsed)
    if rule is None:
        return None

    logger.debug(f"contamination: '{question}' tripped {rule.rule_id} for {parsed.value}")
    return Issue(
        type=IssueType.CategoryContamination,
        severity=Severity.Critical,
        description=f"Category violation for {parsed.value}: {rule.reason} "
                    f"(topic {_KIND_LABEL[rule.kind]})",
        conflicts_with=rule.rule_id,
    )


__all__ = ["contaminates"]
