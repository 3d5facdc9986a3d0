"""
Similarity arbitration - asks a chat model whether a question repeats earlier ones.

Only consulted by the orchestrator for borderline questions. Any failure here
is the caller's to absorb; this module raises whatever the provider raises.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from ..core.config import settings
from .provider import ChatMessage, LLMProvider, get_llm_provider

logger = logging.getLogger(__name__)


@dataclass
class SimilarityJudgment:
    """Model verdict for one candidate against the question history."""

    is_similar: bool
    confidence: float
    reasoning: str
    suggested_alternative: Optional[str] = None


class SimilarityArbiter(Protocol):
    """Anything that can judge a candidate against prior questions."""

    async def judge(
        self, question: str, previous_questions: list[str], category: str
    ) -> SimilarityJudgment:
        ...


SYSTEM_PROMPT = (
    "You are an expert at detecting semantic similarity between questions. "
    "You must determine if questions ask about the same concept, even if worded differently."
)

_PROMPT_TEMPLATE = """TASK: Determine if the NEW QUESTION is semantically similar to any PREVIOUS QUESTIONS.

CATEGORY: {category}

PREVIOUS QUESTIONS:
{previous}

NEW QUESTION: "{question}"

SEMANTIC SIMILARITY EXAMPLES:

SIMILAR - SYNONYMS: "Are they from Europe?" vs "Are they European?" (same concept - geographic origin)
SIMILAR - SIZE WORDS: "Is it big?" vs "Is it large?" vs "Is it huge?" (same concept - size)
SIMILAR - CONCEPT MATCH: "Is it electronic?" vs "Does it use electricity?" (same concept - electrical device)
SIMILAR - GRAMMAR VARIATION: "Were they president?" vs "Did they serve as president?" (same concept - presidential role)
SIMILAR - CONCEPT SYNONYMS: "Does it eat meat?" vs "Is it carnivorous?" (same concept - diet)
SIMILAR - COMPLEX GRAMMAR: "Did they serve as president during wartime?" vs "Were they president during a war?" (same concept - wartime presidency)
SIMILAR - PASSIVE/ACTIVE: "Are they considered controversial?" vs "Do historians view them as controversial?" (same concept - controversial reputation)

DIFFERENT: "Are they from Europe?" vs "Are they alive?" (geography vs life status)
DIFFERENT: "Did they start wars?" vs "Did they serve during wartime?" (initiating vs serving during)
DIFFERENT: "Were they popular with voters?" vs "Were they democratically elected?" (popularity vs election process)
DIFFERENT: "Is it big?" vs "Is it expensive?" (size vs cost)
DIFFERENT: "Is it electronic?" vs "Is it fragile?" (technology vs durability)

CRITICAL ANALYSIS GUIDELINES:
1. RELATED vs SAME: "Did they start wars?" and "Did they serve during wartime?" are RELATED but DIFFERENT concepts
   - Starting = initiating conflict (aggressive action)
   - Serving during = governing during existing conflict (circumstantial)
   - VERDICT: NOT SIMILAR

2. POPULARITY vs PROCESS: "Were they popular with voters?" and "Were they democratically elected?" are DIFFERENT
   - Popular = well-liked (subjective opinion)
   - Elected = won election (objective process)
   - VERDICT: NOT SIMILAR

3. TRUE DUPLICATES: Only mark as similar if they ask the EXACT SAME INFORMATION
   - "Are they European?" = "Are they from Europe?" (SAME - geographic origin)
   - "Is it big?" = "Is it large?" (SAME - size descriptor)

RESPOND IN THIS EXACT FORMAT:
SIMILAR: [YES/NO]
CONFIDENCE: [0.0-1.0]
REASONING: [Brief explanation of why they are/aren't similar]
ALTERNATIVE: [If similar, suggest a different question, otherwise write "N/A"]

ANALYSIS:"""

_FIELDS = ("SIMILAR", "CONFIDENCE", "REASONING", "ALTERNATIVE")
_NO_ALTERNATIVE = {"", "N/A", "NA", "NONE"}


def build_similarity_prompt(question: str, previous_questions: list[str], category: str) -> str:
    previous = "\n".join(f"{i}. {q}" for i, q in enumerate(previous_questions, 1))
    return _PROMPT_TEMPLATE.format(category=category, previous=previous, question=question)


def parse_judgment(text: str) -> SimilarityJudgment:
    """Parse the SIMILAR/CONFIDENCE/REASONING/ALTERNATIVE block. First occurrence of each wins."""
    fields: dict[str, str] = {}
    for line in (text or "").splitlines():
        key, sep, value = line.strip().partition(":")
        key = key.strip(" *#").upper()
        if sep and key in _FIELDS and key not in fields:
            fields[key] = value.strip(" *")

    is_similar = "YES" in fields.get("SIMILAR", "").upper()

    try:
        confidence = float(fields.get("CONFIDENCE", "0.5").strip("[] "))
    except ValueError:
        logger.debug(f"unparseable confidence: {fields.get('CONFIDENCE')!r}")
        confidence = 0.5
    confidence = max(0.0, min(1.0, confidence))

    reasoning = fields.get("REASONING") or "Unable to parse reasoning"

    alternative = fields.get("ALTERNATIVE", "").strip("[]\" ")
    if alternative.upper() in _NO_ALTERNATIVE:
        alternative = None

    return SimilarityJudgment(
        is_similar=is_similar,
        confidence=confidence,
        reasoning=reasoning,
        suggested_alternative=alternative,
    )


class LLMSimilarityArbiter:
    """SimilarityArbiter backed by any chat provider."""

    def __init__(
        self,
        provider: LLMProvider,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ):
        self.provider = provider
        self.temperature = settings.arbitration_temperature if temperature is None else temperature
        self.max_tokens = settings.arbitration_max_tokens if max_tokens is None else max_tokens

    async def judge(
        self, question: str, previous_questions: list[str], category: str
    ) -> SimilarityJudgment:
        if not previous_questions:
            return SimilarityJudgment(
                is_similar=False,
                confidence=1.0,
                reasoning="No previous questions to compare against",
            )

        prompt = build_similarity_prompt(question, previous_questions, category)
        response = await self.provider.chat(
            [ChatMessage(role="user", content=prompt)],
            system_prompt=SYSTEM_PROMPT,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )
        judgment = parse_judgment(response.content)
        logger.debug(
            f"arbiter ({response.model}): similar={judgment.is_similar} "
            f"conf={judgment.confidence:.2f} for '{question}'"
        )
        return judgment

    async def similarity_score(self, question_a: str, question_b: str, category: str) -> float:
        """Score in [0, 1]: confidence when judged similar, its complement otherwise."""
        judgment = await self.judge(question_a, [question_b], category)
        return judgment.confidence if judgment.is_similar else 1.0 - judgment.confidence


def get_arbiter() -> Optional[LLMSimilarityArbiter]:
    """Arbiter for the configured provider, or None when arbitration is off."""
    if not settings.arbitration_enabled:
        return None
    provider = get_llm_provider()
    if provider is None:
        return None
    return LLMSimilarityArbiter(provider)


__all__ = [
    "SimilarityJudgment",
    "SimilarityArbiter",
    "SYSTEM_PROMPT",
    "LLMSimilarityArbiter",
    "build_similarity_prompt",
    "parse_judgment",
    "get_arbiter",
]
