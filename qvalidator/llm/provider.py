"""
LLM Provider - Ollama integration and the settings-driven provider factory.
The validator only needs plain chat completion; providers are interchangeable.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Protocol

import httpx

from ..core.config import settings

logger = logging.getLogger(__name__)


@dataclass
class ChatMessage:
    """A message in a conversation."""

    role: str  # "system", "user", "assistant"
    content: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class ChatResponse:
    """Response from LLM with metadata."""

    content: str
    model: str
    tokens_prompt: int
    tokens_completion: int
    duration_ms: float


class LLMProvider(Protocol):
    """What the arbitration layer needs from a chat model."""

    async def chat(
        self,
        messages: list[ChatMessage],
        system_prompt: Optional[str] = None,
        temperature: float = 0.7,
        max_tokens: int = 1024,
    ) -> ChatResponse:
        ...

    async def health_check(self) -> bool:
        ...

    async def close(self) -> None:
        ...


class OllamaProvider:
    """
    Ollama LLM provider.
    Posts non-streaming chat requests to a local Ollama server.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:11434",
        model: str = "llama3.1:8b-instruct-q4_0",
        timeout: float = 120.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def chat(
        self,
        messages: list[ChatMessage],
        system_prompt: Optional[str] = None,
        temperature: float = 0.7,
        max_tokens: int = 1024,
    ) -> ChatResponse:
        """Generate a chat response using Ollama."""
        client = await self._get_client()

        ollama_messages = []
        if system_prompt:
            ollama_messages.append({"role": "system", "content": system_prompt})

        for msg in messages:
            ollama_messages.append({
                "role": msg.role,
                "content": msg.content,
            })

        start = datetime.now(timezone.utc)

        response = await client.post(
            f"{self.base_url}/api/chat",
            json={
                "model": self.model,
                "messages": ollama_messages,
                "stream": False,
                "options": {
                    "temperature": temperature,
                    "num_predict": max_tokens,
                },
            },
        )
        response.raise_for_status()

        data = response.json()
        duration = (datetime.now(timezone.utc) - start).total_seconds() * 1000

        return ChatResponse(
            content=data.get("message", {}).get("content", ""),
            model=data.get("model", self.model),
            tokens_prompt=data.get("prompt_eval_count", 0),
            tokens_completion=data.get("eval_count", 0),
            duration_ms=duration,
        )

    async def health_check(self) -> bool:
        """Check if Ollama is available."""
        try:
            client = await self._get_client()
            response = await client.get(f"{self.base_url}/api/tags")
            return response.status_code == 200
        except Exception as e:
            logger.error(f"Ollama health check failed: {e}")
            return False


# Singleton instance
_provider: Optional[LLMProvider] = None


def get_llm_provider() -> Optional[LLMProvider]:
    """Get or create the LLM provider based on settings. None when disabled."""
    global _provider

    if settings.llm_provider == "none":
        return None

    if _provider is None:
        if settings.llm_provider == "openai":
            from .openai_provider import OpenAIProvider
            _provider = OpenAIProvider(
                api_key=settings.openai_api_key,
                model=settings.openai_model,
                base_url=settings.openai_base_url,
                timeout=settings.llm_timeout_seconds,
            )
        elif settings.llm_provider == "anthropic":
            from .anthropic_provider import AnthropicProvider
            _provider = AnthropicProvider(
                api_key=settings.anthropic_api_key,
                model=settings.anthropic_model,
                timeout=settings.llm_timeout_seconds,
            )
        else:
            # Default to Ollama
            _provider = OllamaProvider(
                base_url=settings.ollama_base_url,
                model=settings.ollama_model,
                timeout=settings.llm_timeout_seconds,
            )
        logger.info(f"LLM provider initialised: {settings.llm_provider}")

    return _provider


def current_llm_provider() -> Optional[LLMProvider]:
    """The provider built so far, if any. Never creates one."""
    return _provider


def reset_llm_provider() -> None:
    """Drop the cached provider. Tests and settings reloads use this."""
    global _provider
    _provider = None


__all__ = [
    "ChatMessage",
    "ChatResponse",
    "LLMProvider",
    "OllamaProvider",
    "get_llm_provider",
    "current_llm_provider",
    "reset_llm_provider",
]
