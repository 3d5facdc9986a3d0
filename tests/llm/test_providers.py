"""Tests for the chat providers and the provider factory. No network: httpx.MockTransport."""

import json
from unittest.mock import patch

import httpx
import pytest


def _client(handler):
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.fixture(autouse=True)
def reset_provider():
    from qvalidator.llm.provider import reset_llm_provider

    reset_llm_provider()
    yield
    reset_llm_provider()


class TestOllamaProvider:
    @pytest.mark.asyncio
    async def test_chat_payload_and_response(self):
        from qvalidator.llm.provider import ChatMessage, OllamaProvider

        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={
                "model": "llama3.1",
                "message": {"role": "assistant", "content": "SIMILAR: NO"},
                "prompt_eval_count": 12,
                "eval_count": 3,
            })

        provider = OllamaProvider(base_url="http://ollama.test/")
        provider._client = _client(handler)

        response = await provider.chat(
            [ChatMessage(role="user", content="hi")],
            system_prompt="be brief",
            temperature=0.1,
            max_tokens=50,
        )

        assert seen["url"] == "http://ollama.test/api/chat"
        assert seen["body"]["stream"] is False
        assert seen["body"]["messages"][0] == {"role": "system", "content": "be brief"}
        assert seen["body"]["options"] == {"temperature": 0.1, "num_predict": 50}
        assert response.content == "SIMILAR: NO"
        assert response.tokens_prompt == 12
        assert response.tokens_completion == 3
        await provider.close()

    @pytest.mark.asyncio
    async def test_http_error_raises(self):
        from qvalidator.llm.provider import ChatMessage, OllamaProvider

        provider = OllamaProvider()
        provider._client = _client(lambda request: httpx.Response(500))

        with pytest.raises(httpx.HTTPStatusError):
            await provider.chat([ChatMessage(role="user", content="hi")])
        await provider.close()

    @pytest.mark.asyncio
    async def test_health_check(self):
        from qvalidator.llm.provider import OllamaProvider

        provider = OllamaProvider()
        provider._client = _client(lambda request: httpx.Response(200, json={"models": []}))
        assert await provider.health_check() is True
        await provider.close()

    @pytest.mark.asyncio
    async def test_health_check_connection_error(self):
        from qvalidator.llm.provider import OllamaProvider

        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        provider = OllamaProvider()
        provider._client = _client(handler)
        assert await provider.health_check() is False
        await provider.close()


class TestOpenAIProvider:
    @pytest.mark.asyncio
    async def test_missing_key(self):
        from qvalidator.llm.openai_provider import OpenAIProvider
        from qvalidator.llm.provider import ChatMessage

        provider = OpenAIProvider()
        provider.api_key = ""
        with pytest.raises(ValueError):
            await provider.chat([ChatMessage(role="user", content="hi")])
        assert await provider.health_check() is False

    @pytest.mark.asyncio
    async def test_chat(self):
        from qvalidator.llm.openai_provider import OpenAIProvider
        from qvalidator.llm.provider import ChatMessage

        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path.endswith("/chat/completions")
            body = json.loads(request.content)
            assert body["messages"][0]["role"] == "system"
            return httpx.Response(200, json={
                "model": "gpt-4o-mini",
                "choices": [{"message": {"content": "SIMILAR: YES"}}],
                "usage": {"prompt_tokens": 5, "completion_tokens": 2},
            })

        provider = OpenAIProvider(api_key="sk-test")
        provider._client = _client(handler)

        response = await provider.chat([ChatMessage(role="user", content="hi")], system_prompt="sys")
        assert response.content == "SIMILAR: YES"
        assert response.tokens_completion == 2
        await provider.close()


class TestAnthropicProvider:
    @pytest.mark.asyncio
    async def test_missing_key(self):
        from qvalidator.llm.anthropic_provider import AnthropicProvider
        from qvalidator.llm.provider import ChatMessage

        provider = AnthropicProvider()
        provider.api_key = ""
        with pytest.raises(ValueError):
            await provider.chat([ChatMessage(role="user", content="hi")])

    @pytest.mark.asyncio
    async def test_system_folds_into_field(self):
        from qvalidator.llm.anthropic_provider import AnthropicProvider
        from qvalidator.llm.provider import ChatMessage

        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={
                "model": "claude-3-haiku-20240307",
                "content": [{"type": "text", "text": "SIMILAR: "}, {"type": "text", "text": "NO"}],
                "usage": {"input_tokens": 9, "output_tokens": 4},
            })

        provider = AnthropicProvider(api_key="test-key")
        provider._client = _client(handler)

        response = await provider.chat(
            [ChatMessage(role="system", content="extra"), ChatMessage(role="user", content="hi")],
            system_prompt="base",
        )

        assert seen["body"]["system"] == "base\n\nextra"
        assert seen["body"]["messages"] == [{"role": "user", "content": "hi"}]
        assert response.content == "SIMILAR: NO"
        assert response.tokens_prompt == 9
        await provider.close()


class TestProviderFactory:
    def test_none_disables(self):
        from qvalidator.llm.provider import get_llm_provider

        with patch("qvalidator.llm.provider.settings") as mock_settings:
            mock_settings.llm_provider = "none"
            assert get_llm_provider() is None

    def test_ollama_default(self):
        from qvalidator.llm.provider import OllamaProvider, get_llm_provider

        with patch("qvalidator.llm.provider.settings") as mock_settings:
            mock_settings.llm_provider = "ollama"
            mock_settings.ollama_base_url = "http://ollama.test"
            mock_settings.ollama_model = "tiny"
            mock_settings.llm_timeout_seconds = 5.0

            provider = get_llm_provider()
            assert isinstance(provider, OllamaProvider)
            assert provider.model == "tiny"
            # singleton
            assert get_llm_provider() is provider

    def test_openai(self):
        from qvalidator.llm.openai_provider import OpenAIProvider
        from qvalidator.llm.provider import get_llm_provider

        with patch("qvalidator.llm.provider.settings") as mock_settings:
            mock_settings.llm_provider = "openai"
            mock_settings.openai_api_key = "sk-test"
            mock_settings.openai_model = "gpt-4o-mini"
            mock_settings.openai_base_url = "https://api.openai.com/v1"
            mock_settings.llm_timeout_seconds = 5.0

            assert isinstance(get_llm_provider(), OpenAIProvider)

    def test_anthropic(self):
        from qvalidator.llm.anthropic_provider import AnthropicProvider
        from qvalidator.llm.provider import get_llm_provider

        with patch("qvalidator.llm.provider.settings") as mock_settings:
            mock_settings.llm_provider = "anthropic"
            mock_settings.anthropic_api_key = "test-key"
            mock_settings.anthropic_model = "claude-3-haiku-20240307"
            mock_settings.llm_timeout_seconds = 5.0

            assert isinstance(get_llm_provider(), AnthropicProvider)

    def test_current_provider_never_builds_one(self):
        from qvalidator.llm.provider import current_llm_provider, get_llm_provider

        with patch("qvalidator.llm.provider.settings") as mock_settings:
            mock_settings.llm_provider = "ollama"
            mock_settings.ollama_base_url = "http://ollama.test"
            mock_settings.ollama_model = "tiny"
            mock_settings.llm_timeout_seconds = 5.0

            assert current_llm_provider() is None
            provider = get_llm_provider()
            assert current_llm_provider() is provider


__all__ = []
