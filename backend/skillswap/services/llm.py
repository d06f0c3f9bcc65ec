from __future__ import annotations

import logging
from typing import Any, Protocol

import httpx

from skillswap.core.config import Settings
from skillswap.core.errors import ConfigurationError, ErrorKind, ProviderError
from skillswap.services.prompts import Prompt
from skillswap.services.retry import error_kind_for_status

logger = logging.getLogger(__name__)

SUPPORTED_LLM_PROVIDERS = {"mistral", "gemini"}


class LLMClient(Protocol):
    name: str
    model: str

    async def complete(self, prompt: Prompt) -> str: ...


async def _post_json(
    http: httpx.AsyncClient,
    url: str,
    *,
    provider: str,
    headers: dict[str, str],
    body: dict[str, Any],
    timeout: float,
) -> dict[str, Any]:
    try:
        response = await http.post(url, headers=headers, json=body, timeout=timeout)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        status = exc.response.status_code
        raise ProviderError(
            f"{provider} API error ({status}): {exc.response.text[:500]}",
            kind=error_kind_for_status(status),
            status_code=status,
        ) from exc
    except httpx.HTTPError as exc:
        raise ProviderError(f"{provider} request failed: {exc}", kind=ErrorKind.transient) from exc

    try:
        return response.json()
    except ValueError as exc:
        raise ProviderError(
            f"{provider} returned a non-JSON body",
            kind=ErrorKind.transient,
            status_code=response.status_code,
        ) from exc


class MistralClient:
    """Chat-completions provider; the expected JSON shape travels inside the prompt text."""

    name = "mistral"

    def __init__(
        self,
        http: httpx.AsyncClient,
        *,
        api_key: str,
        model: str,
        api_base: str,
        temperature: float = 0.4,
        timeout: float = 45.0,
    ):
        self.http = http
        self.api_key = api_key
        self.model = model
        self.api_base = api_base.rstrip("/")
        self.temperature = temperature
        self.timeout = timeout

    def build_body(self, prompt: Prompt) -> dict[str, Any]:
        content = f"{prompt.text}\n\nReturn ONLY valid JSON in this exact format:\n{prompt.format_hint}"
        return {
            "model": self.model,
            "messages": [{"role": "user", "content": content}],
            "temperature": self.temperature,
            "max_tokens": prompt.max_tokens,
        }

    async def complete(self, prompt: Prompt) -> str:
        data = await _post_json(
            self.http,
            f"{self.api_base}/chat/completions",
            provider=self.name,
            headers={
                "Authorization": f"Bearer {self.api_key}",
                "Content-Type": "application/json",
            },
            body=self.build_body(prompt),
            timeout=self.timeout,
        )
        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            content = None
        if not content:
            raise ProviderError("No content received from Mistral API", kind=ErrorKind.transient)
        return content


class GeminiClient:
    """generateContent provider with a declared response schema."""

    name = "gemini"

    def __init__(
        self,
        http: httpx.AsyncClient,
        *,
        api_key: str,
        model: str,
        api_base: str,
        temperature: float = 0.4,
        timeout: float = 45.0,
    ):
        self.http = http
        self.api_key = api_key
        self.model = model
        self.api_base = api_base.rstrip("/")
        self.temperature = temperature
        self.timeout = timeout

    def build_body(self, prompt: Prompt) -> dict[str, Any]:
        return {
            "contents": [{"role": "user", "parts": [{"text": prompt.text}]}],
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": prompt.schema,
                "temperature": self.temperature,
            },
        }

    async def complete(self, prompt: Prompt) -> str:
        data = await _post_json(
            self.http,
            f"{self.api_base}/models/{self.model}:generateContent",
            provider=self.name,
            headers={"x-goog-api-key": self.api_key, "Content-Type": "application/json"},
            body=self.build_body(prompt),
            timeout=self.timeout,
        )
        try:
            parts = data["candidates"][0]["content"]["parts"]
            text = "".join(part.get("text", "") for part in parts)
        except (KeyError, IndexError, TypeError, AttributeError):
            text = ""
        if not text:
            raise ProviderError("No content received from Gemini API", kind=ErrorKind.transient)
        return text


def build_llm_client(settings: Settings, http: httpx.AsyncClient) -> LLMClient | None:
    """Create the configured provider client, or None when AI is switched off."""
    if not settings.ai_enabled:
        logger.info("AI disabled; all content will come from offline fallbacks")
        return None

    provider = settings.llm_provider
    if provider not in SUPPORTED_LLM_PROVIDERS:
        raise ConfigurationError(
            f"Unsupported LLM_PROVIDER '{provider}'; expected one of {sorted(SUPPORTED_LLM_PROVIDERS)}"
        )
    if provider == "gemini":
        if not settings.gemini_api_key:
            raise ConfigurationError("GEMINI_API_KEY (or API_KEY) is not configured")
        return GeminiClient(
            http,
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
            api_base=settings.gemini_api_base,
            temperature=settings.llm_temperature,
            timeout=settings.llm_timeout_seconds,
        )
    if not settings.mistral_api_key:
        raise ConfigurationError("MISTRAL_API_KEY is not configured")
    return MistralClient(
        http,
        api_key=settings.mistral_api_key,
        model=settings.mistral_model,
        api_base=settings.mistral_api_base,
        temperature=settings.llm_temperature,
        timeout=settings.llm_timeout_seconds,
    )
