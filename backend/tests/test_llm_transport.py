from pathlib import Path
import asyncio
import json
import sys

import httpx
import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from skillswap.core.config import Settings
from skillswap.core.errors import ConfigurationError, ErrorKind, ProviderError
from skillswap.services.content import ContentGenerator
from skillswap.services.llm import GeminiClient, MistralClient, build_llm_client
from skillswap.services.prompts import build_quiz_prompt, build_skills_prompt

SKILLS_ANSWER = json.dumps({"skills": ["Rust", "Go", "Kotlin", "Elixir", "Zig"]})


def _mistral(handler):
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return MistralClient(
        http,
        api_key="mistral-key",
        model="mistral-small",
        api_base="https://api.mistral.test/v1/",
        temperature=0.4,
    )


def _gemini(handler):
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return GeminiClient(
        http,
        api_key="gemini-key",
        model="gemini-2.5-flash",
        api_base="https://gemini.test/v1beta",
        temperature=0.2,
    )


def _settings(**overrides):
    values = {"ai_enabled": True, "mistral_api_key": None, "gemini_api_key": None}
    values.update(overrides)
    return Settings(_env_file=None, **values)


def test_mistral_request_shape_and_content():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"choices": [{"message": {"content": SKILLS_ANSWER}}]})

    prompt = build_skills_prompt(["Python"], ["ML"])
    content = asyncio.run(_mistral(handler).complete(prompt))

    assert content == SKILLS_ANSWER
    request = seen[0]
    assert str(request.url) == "https://api.mistral.test/v1/chat/completions"
    assert request.headers["Authorization"] == "Bearer mistral-key"
    body = json.loads(request.content)
    assert body["model"] == "mistral-small"
    assert body["temperature"] == 0.4
    assert body["max_tokens"] == 1000
    assert body["messages"][0]["role"] == "user"
    assert body["messages"][0]["content"].endswith(
        "Return ONLY valid JSON in this exact format:\n" + prompt.format_hint
    )


def test_gemini_request_declares_response_schema():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(
            200,
            json={"candidates": [{"content": {"parts": [{"text": '{"skills": '}, {"text": '["Go"]}'}]}}]},
        )

    prompt = build_quiz_prompt("Go")
    content = asyncio.run(_gemini(handler).complete(prompt))

    assert content == '{"skills": ["Go"]}'
    request = seen[0]
    assert request.url.path == "/v1beta/models/gemini-2.5-flash:generateContent"
    assert request.headers["x-goog-api-key"] == "gemini-key"
    body = json.loads(request.content)
    assert body["contents"][0]["parts"][0]["text"] == prompt.text
    config = body["generationConfig"]
    assert config["responseMimeType"] == "application/json"
    assert config["responseSchema"] == prompt.schema
    assert config["temperature"] == 0.2


@pytest.mark.parametrize(
    "status, kind",
    [
        (400, ErrorKind.fatal),
        (401, ErrorKind.fatal),
        (429, ErrorKind.unavailable),
        (503, ErrorKind.unavailable),
        (500, ErrorKind.transient),
    ],
)
def test_http_status_maps_to_error_kind(status, kind):
    def handler(request):
        return httpx.Response(status, text="provider said no")

    with pytest.raises(ProviderError) as excinfo:
        asyncio.run(_mistral(handler).complete(build_skills_prompt([], [])))
    assert excinfo.value.kind == kind
    assert excinfo.value.status_code == status


def test_empty_content_is_transient():
    def handler(request):
        return httpx.Response(200, json={"choices": [{"message": {"content": ""}}]})

    with pytest.raises(ProviderError) as excinfo:
        asyncio.run(_mistral(handler).complete(build_skills_prompt([], [])))
    assert excinfo.value.kind == ErrorKind.transient


def test_network_failure_is_transient():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(ProviderError) as excinfo:
        asyncio.run(_gemini(handler).complete(build_skills_prompt([], [])))
    assert excinfo.value.kind == ErrorKind.transient


def test_generator_retries_unavailable_provider_over_http():
    statuses = [503, 200]
    requests = []

    def handler(request):
        requests.append(request)
        status = statuses[len(requests) - 1]
        if status != 200:
            return httpx.Response(status, text="overloaded")
        return httpx.Response(200, json={"choices": [{"message": {"content": SKILLS_ANSWER}}]})

    async def no_sleep(delay):
        return None

    generator = ContentGenerator(_mistral(handler), sleep=no_sleep)
    result = asyncio.run(generator.suggest_skills(["Python"], []))
    assert len(requests) == 2
    assert result.skills == ["Rust", "Go", "Kotlin", "Elixir", "Zig"]


def test_build_client_returns_none_when_ai_disabled():
    http = httpx.AsyncClient()
    assert build_llm_client(_settings(ai_enabled=False), http) is None


def test_build_client_requires_api_key():
    http = httpx.AsyncClient()
    with pytest.raises(ConfigurationError):
        build_llm_client(_settings(llm_provider="mistral"), http)
    with pytest.raises(ConfigurationError):
        build_llm_client(_settings(llm_provider="gemini"), http)


def test_build_client_rejects_unknown_provider():
    with pytest.raises(ConfigurationError):
        build_llm_client(_settings(llm_provider="openai", mistral_api_key="k"), httpx.AsyncClient())


def test_build_client_picks_configured_provider():
    http = httpx.AsyncClient()
    mistral = build_llm_client(_settings(llm_provider=" Mistral ", mistral_api_key="k"), http)
    assert isinstance(mistral, MistralClient)
    gemini = build_llm_client(_settings(llm_provider="gemini", gemini_api_key="g"), http)
    assert isinstance(gemini, GeminiClient)
    assert gemini.model == "gemini-2.5-flash"


def test_gemini_key_accepts_api_key_env(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.setenv("API_KEY", "env-key")
    settings = Settings(_env_file=None, llm_provider="gemini")
    assert settings.gemini_api_key == "env-key"
