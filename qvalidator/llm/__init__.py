"""LLM integration - chat providers and the similarity arbiter."""

from .provider import (
    ChatMessage,
    ChatResponse,
    LLMProvider,
    OllamaProvider,
    current_llm_provider,
    get_llm_provider,
    reset_llm_provider,
)
from .openai_provider import OpenAIProvider
from .anthropic_provider import AnthropicProvider
from .arbiter import (
    LLMSimilarityArbiter,
    SimilarityArbiter,
    SimilarityJudgment,
    get_arbiter,
)

__all__ = [
    "ChatMessage",
    "ChatResponse",
    "LLMProvider",
    "OllamaProvider",
    "OpenAIProvider",
    "AnthropicProvider",
    "get_llm_provider",
    "current_llm_provider",
    "reset_llm_provider",
    "LLMSimilarityArbiter",
    "SimilarityArbiter",
    "SimilarityJudgment",
    "get_arbiter",
]
