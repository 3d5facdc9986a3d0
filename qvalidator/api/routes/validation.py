"""
Validation API routes.
"""

from dataclasses import asdict

from fastapi import APIRouter

from ..schemas import (
    BatchValidateRequest,
    BatchValidateResponse,
    CategoryInfo,
    StatsRequest,
    ValidateQuestionRequest,
    ValidationStatsResponse,
)
from ...core.deps import get_validator
from ...core.models.category import Category, meta_category
from ...core.models.validation import ValidationResult
from ...validation.category_rules import examples_for
from ...validation.orchestrator import QuestionValidator

router = APIRouter(prefix="/validation", tags=["validation"])


@router.get("/categories", response_model=list[CategoryInfo])
async def list_categories():
    """Playable categories with their example questions."""
    infos = []
    for category in Category:
        if category is Category.Unknown:
            continue
        examples = examples_for(category)
        infos.append(
            CategoryInfo(
                name=category.value,
                meta_category=meta_category(category),
                appropriate_examples=list(examples.appropriate),
                blocked_examples=list(examples.blocked),
            )
        )
    return infos


@router.post("/question", response_model=ValidationResult)
async def validate_question(body: ValidateQuestionRequest):
    """Validate one candidate. Bad questions come back as is_valid=false, not as errors."""
    validator = get_validator()
    return await validator.validate_question(
        body.question,
        body.previous_questions,
        body.category,
        body.confirmed_facts,
    )


@router.post("/batch", response_model=BatchValidateResponse)
async def validate_batch(body: BatchValidateRequest):
    """Validate several candidates; results keep input order."""
    validator = get_validator()
    results = await validator.batch_validate_questions(
        body.questions,
        body.previous_questions,
        body.category,
        body.confirmed_facts,
        cumulative=body.cumulative,
    )
    stats = QuestionValidator.get_validation_stats(results)
    return BatchValidateResponse(
        results=results,
        stats=ValidationStatsResponse(**asdict(stats)),
    )


@router.post("/stats", response_model=ValidationStatsResponse)
async def validation_stats(body: StatsRequest):
    """Aggregate previously returned results."""
    stats = QuestionValidator.get_validation_stats(body.results)
    return ValidationStatsResponse(**asdict(stats))
