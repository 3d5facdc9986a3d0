"""
Anthropic LLM Provider.
Uses the Messages API; the system prompt travels as a separate field.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

import httpx

from ..core.config import settings
from .provider import ChatMessage, ChatResponse

logger = logging.getLogger(__name__)

ANTHROPIC_VERSION = "2023-06-01"


class AnthropicProvider:
    """Anthropic Claude provider."""

    def __init__(
        self,
        api_key: str = "",
        model: str = "claude-3-haiku-20240307",
        timeout: float = 120.0,
    ):
        self.api_key = api_key or settings.anthropic_api_key
        self.model = model or settings.anthropic_model
        self.base_url = "https://api.anthropic.com/v1"
        self.timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers={
                    "x-api-key": self.api_key,
                    "anthropic-version": ANTHROPIC_VERSION,
                    "Content-Type": "application/json",
                },
            )
        return self._client

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def chat(
        self,
        messages: List[ChatMessage],
        system_prompt: Optional[str] = None,
        temperature: float = 0.7,
        max_tokens: int = 1024,
    ) -> ChatResponse:
        """Generate a chat response using Anthropic API."""
        if not self.api_key:
            raise ValueError("Anthropic API key not configured. Set ANTHROPIC_API_KEY env var.")

        client = await self._get_client()

        # system messages fold into the top-level system field
        system_parts = [system_prompt] if system_prompt else []
        anthropic_messages = []
        for msg in messages:
            if msg.role == "system":
                system_parts.append(msg.content)
            else:
                anthropic_messages.append({"role": msg.role, "content": msg.content})

        payload = {
            "model": self.model,
            "messages": anthropic_messages,
            "temperature": temperature,
            "max_tokens": max_tokens,
        }
        if system_parts:
            payload["system"] = "\n\n".join(system_parts)

        start = datetime.now(timezone.utc)

        response = await client.post(f"{self.base_url}/messages", json=payload)
        response.raise_for_status()

        data = response.json()
        duration = (datetime.now(timezone.utc) - start).total_seconds() * 1000

        content = ""
        for block in data.get("content", []):
            if block.get("type") == "text":
                content += block.get("text", "")

        usage = data.get("usage", {})

        return ChatResponse(
            content=content,
            model=data.get("model", self.model),
            tokens_prompt=usage.get("input_tokens", 0),
            tokens_completion=usage.get("output_tokens", 0),
            duration_ms=duration,
        )

    async def health_check(self) -> bool:
        """Check if Anthropic API is accessible."""
        if not self.api_key:
            return False
        try:
            client = await self._get_client()
            # no health endpoint; a 400 on an empty request still proves connectivity
            response = await client.post(
                f"{self.base_url}/messages",
                json={"model": self.model, "messages": [], "max_tokens": 1},
            )
            return response.status_code in (200, 400)
        except Exception as e:
            logger.error(f"Anthropic health check failed: {e}")
            return False


__all__ = ["AnthropicProvider"]
