from __future__ import annotations

import logging
import random
import re
from string import Template
from typing import Any, Mapping

from skillswap.schemas.content import (
    QUIZ_QUESTION_COUNT,
    SKILL_SUGGESTION_COUNT,
    ContentKind,
    GenerationResult,
    Quiz,
    Roadmap,
    SkillSuggestions,
)
from skillswap.services.fallback_content import (
    CANONICAL_QUIZZES,
    DEFAULT_DOMAIN,
    DOMAIN_KEYWORDS,
    DOMAIN_QUESTION_TEMPLATES,
    ROADMAP_STEP_TEMPLATES,
    SKILL_ALIASES,
    SUGGESTED_SKILL_POOL,
)

logger = logging.getLogger(__name__)


def _normalize(topic: str) -> str:
    return (topic or "").strip().lower()


def _keyword_in(keyword: str, text: str) -> bool:
    # Plain substring: "c++17" is c++ and "pyspark" is python.
    return keyword in text


def _identifier(topic: str) -> str:
    parts = re.split(r"[^0-9A-Za-z]+", topic)
    return "".join(part[:1].upper() + part[1:] for part in parts if part) or "Topic"


def _render(template: dict[str, Any], values: dict[str, str]) -> dict[str, Any]:
    rendered: dict[str, Any] = {}
    for key, value in template.items():
        if isinstance(value, str):
            rendered[key] = Template(value).safe_substitute(values)
        elif isinstance(value, list):
            rendered[key] = [
                Template(item).safe_substitute(values) if isinstance(item, str) else item
                for item in value
            ]
        else:
            rendered[key] = value
    return rendered


def match_canonical_key(topic: str) -> str | None:
    """Return the canonical skill key for ``topic``, or None when nothing matches.

    An exact key wins outright. Otherwise each key is scored by the longest of
    its aliases found in the topic, and the longest alias overall wins; equal
    lengths resolve to the key listed first in SKILL_ALIASES.
    """
    normalized = _normalize(topic)
    if not normalized:
        return None
    if normalized in SKILL_ALIASES:
        return normalized

    best_key: str | None = None
    best_length = 0
    for key, aliases in SKILL_ALIASES.items():
        matched = [alias for alias in aliases if _keyword_in(alias, normalized)]
        if not matched:
            continue
        length = max(len(alias) for alias in matched)
        if length > best_length:
            best_key, best_length = key, length
    return best_key


def detect_domain(topic: str) -> str:
    normalized = _normalize(topic)
    for domain, keywords in DOMAIN_KEYWORDS.items():
        if any(_keyword_in(keyword, normalized) for keyword in keywords):
            return domain
    return DEFAULT_DOMAIN


class FallbackSelector:
    """Offline content used when the LLM provider is unavailable or answers badly."""

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()

    def select_quiz(self, topic: str) -> Quiz:
        key = match_canonical_key(topic)
        if key is not None:
            logger.info("Serving canonical fallback quiz %r for topic %r", key, topic)
            return Quiz.model_validate({"questions": CANONICAL_QUIZZES[key]})

        domain = detect_domain(topic)
        logger.info("Serving %s-domain template quiz for topic %r", domain, topic)
        return Quiz.model_validate({"questions": self.domain_questions(topic, domain)})

    select_fallback = select_quiz

    def domain_questions(self, topic: str, domain: str) -> list[dict[str, Any]]:
        pool = DOMAIN_QUESTION_TEMPLATES.get(domain) or DOMAIN_QUESTION_TEMPLATES[DEFAULT_DOMAIN]
        label = (topic or "").strip() or "this topic"
        values = {"skill": label, "skill_ident": _identifier(label)}
        picked = self.rng.sample(pool, k=min(QUIZ_QUESTION_COUNT, len(pool)))
        return [_render(template, values) for template in picked]

    def select_roadmap(self, skill: str) -> Roadmap:
        label = (skill or "").strip() or "this skill"
        steps = [
            {"step": index, **_render(template, {"skill": label})}
            for index, template in enumerate(ROADMAP_STEP_TEMPLATES, start=1)
        ]
        return Roadmap.model_validate({"steps": steps})

    def select_skills(
        self,
        current_skills: list[str] | None = None,
        current_goals: list[str] | None = None,
    ) -> SkillSuggestions:
        taken = {_normalize(value) for value in [*(current_skills or []), *(current_goals or [])]}
        fresh = [skill for skill in SUGGESTED_SKILL_POOL if _normalize(skill) not in taken]
        if len(fresh) < SKILL_SUGGESTION_COUNT:
            # The user already knows most of the pool; repeat known skills rather than return fewer.
            fresh += [skill for skill in SUGGESTED_SKILL_POOL if skill not in fresh]
        return SkillSuggestions(skills=fresh[:SKILL_SUGGESTION_COUNT])

    def select(self, kind: ContentKind, parameters: Mapping[str, Any]) -> GenerationResult:
        kind = ContentKind(kind)
        if kind == ContentKind.quiz:
            return self.select_quiz(parameters.get("skill", ""))
        if kind == ContentKind.roadmap:
            return self.select_roadmap(parameters.get("skill", ""))
        if kind == ContentKind.skills:
            return self.select_skills(
                list(parameters.get("current_skills") or []),
                list(parameters.get("current_goals") or []),
            )
        raise ValueError(f"No offline fallback for {kind.value} content")
