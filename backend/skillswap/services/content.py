from __future__ import annotations

import asyncio
import json
import logging
import random
import re
from collections.abc import Awaitable, Callable
from typing import Any, Mapping

from pydantic import ValidationError

from skillswap.core.errors import ContentGenerationError, ResponseValidationError
from skillswap.schemas.content import (
    ContentKind,
    GenerationRequest,
    GenerationResult,
    MatchAnalysis,
    Quiz,
    Roadmap,
    SkillSuggestions,
    UserProfile,
)
from skillswap.services.fallback import FallbackSelector
from skillswap.services.llm import LLMClient
from skillswap.services.prompts import (
    Prompt,
    build_match_prompt,
    build_quiz_prompt,
    build_roadmap_prompt,
    build_skills_prompt,
)
from skillswap.services.retry import execute_with_retry

logger = logging.getLogger(__name__)

CODE_FENCE_RE = re.compile(r"```(?:json)?\n?", re.IGNORECASE)
NEUTRAL_MATCH = {"score": 50, "reasoning": "AI analysis unavailable.", "commonInterests": []}

_RESULT_MODELS: dict[ContentKind, tuple[type, str | None]] = {
    ContentKind.skills: (SkillSuggestions, "skills"),
    ContentKind.roadmap: (Roadmap, "steps"),
    ContentKind.quiz: (Quiz, "questions"),
    ContentKind.match: (MatchAnalysis, None),
}


def _safe_json(text: str) -> Any:
    cleaned = CODE_FENCE_RE.sub("", text or "").strip()
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError:
        pass
    # Models sometimes wrap the payload in prose; keep the outermost JSON value.
    starts = [pos for pos in (cleaned.find("{"), cleaned.find("[")) if pos >= 0]
    if starts:
        start = min(starts)
        end = max(cleaned.rfind("}"), cleaned.rfind("]")) + 1
        try:
            return json.loads(cleaned[start:end])
        except json.JSONDecodeError:
            pass
    raise ResponseValidationError(f"Response is not valid JSON: {cleaned[:200]!r}")


def parse_generation_result(prompt: Prompt, raw: str) -> GenerationResult:
    """Decode and shape-check a provider answer; raises ResponseValidationError on any mismatch."""
    data = _safe_json(raw)
    if prompt.envelope and isinstance(data, dict) and prompt.envelope in data:
        data = data[prompt.envelope]

    model, field_name = _RESULT_MODELS[prompt.kind]
    if field_name is not None:
        if not isinstance(data, list):
            raise ResponseValidationError(
                f"Expected a list of {prompt.kind.value} entries, got {type(data).__name__}"
            )
        data = {field_name: data}
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise ResponseValidationError(f"Invalid {prompt.kind.value} response: {exc}") from exc


class ContentGenerator:
    def __init__(
        self,
        client: LLMClient | None,
        *,
        fallback: FallbackSelector | None = None,
        max_retries: int = 3,
        base_delay: float = 1.0,
        strict: bool = False,
        sleep: Callable[[float], Awaitable[object]] = asyncio.sleep,
        rng: random.Random | None = None,
    ):
        self.client = client
        self.fallback = fallback or FallbackSelector(rng=rng)
        self.max_retries = max_retries
        self.base_delay = base_delay
        self.strict = strict
        self.sleep = sleep
        self.rng = rng

    @property
    def ai_enabled(self) -> bool:
        return self.client is not None

    async def _call_model(self, prompt: Prompt) -> GenerationResult:
        client = self.client
        if client is None:
            raise ContentGenerationError(prompt.kind.value, "AI is disabled")
        raw = await execute_with_retry(
            lambda: client.complete(prompt),
            self.max_retries,
            self.base_delay,
            sleep=self.sleep,
            rng=self.rng,
        )
        result = parse_generation_result(prompt, raw)
        logger.info("Generated %s content with %s/%s", prompt.kind.value, client.name, client.model)
        return result

    async def _generate_or_fallback(
        self,
        prompt: Prompt,
        fallback: Callable[[], GenerationResult],
    ) -> GenerationResult:
        try:
            return await self._call_model(prompt)
        except Exception as exc:
            if self.strict:
                if isinstance(exc, ContentGenerationError):
                    raise
                raise ContentGenerationError(prompt.kind.value, str(exc)) from exc
            logger.warning("Using fallback %s content: %s", prompt.kind.value, exc)
            return fallback()

    async def suggest_skills(
        self,
        current_skills: list[str] | None = None,
        current_goals: list[str] | None = None,
    ) -> SkillSuggestions:
        current_skills = list(current_skills or [])
        current_goals = list(current_goals or [])
        return await self._generate_or_fallback(
            build_skills_prompt(current_skills, current_goals),
            lambda: self.fallback.select_skills(current_skills, current_goals),
        )

    async def generate_roadmap(self, skill: str) -> Roadmap:
        return await self._generate_or_fallback(
            build_roadmap_prompt(skill),
            lambda: self.fallback.select_roadmap(skill),
        )

    async def generate_quiz(self, skill: str, difficulty: str = "expert") -> Quiz:
        return await self._generate_or_fallback(
            build_quiz_prompt(skill, difficulty),
            lambda: self.fallback.select_quiz(skill),
        )

    async def analyze_match(self, first: UserProfile, second: UserProfile) -> MatchAnalysis:
        # No offline heuristic exists for pairwise compatibility, so failures get a neutral score.
        try:
            return await self._call_model(build_match_prompt(first, second))
        except Exception as exc:
            logger.warning("Match analysis unavailable: %s", exc)
            return MatchAnalysis.model_validate(NEUTRAL_MATCH)

    async def generate(self, request: GenerationRequest) -> GenerationResult:
        params = request.parameters
        if request.kind == ContentKind.skills:
            return await self.suggest_skills(
                list(params.get("current_skills") or []),
                list(params.get("current_goals") or []),
            )
        if request.kind == ContentKind.roadmap:
            return await self.generate_roadmap(_required(params, "skill"))
        if request.kind == ContentKind.quiz:
            return await self.generate_quiz(
                _required(params, "skill"),
                params.get("difficulty") or "expert",
            )
        return await self.analyze_match(
            UserProfile.model_validate(_required(params, "first")),
            UserProfile.model_validate(_required(params, "second")),
        )


def _required(params: Mapping[str, Any], key: str) -> Any:
    value = params.get(key)
    if value is None or value == "":
        raise ValueError(f"Missing required parameter '{key}'")
    return value
