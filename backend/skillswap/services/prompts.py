from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from skillswap.schemas.content import ContentKind, UserProfile

QUIZ_DIFFICULTIES = ("expert", "advanced", "intermediate")


@dataclass(frozen=True)
class Prompt:
    kind: ContentKind
    text: str
    # OpenAPI-style schema for providers with structured output.
    schema: dict[str, Any]
    # JSON example for providers that only take free text.
    format_hint: str
    # Key wrapping the list in an object-shaped answer, e.g. {"roadmap": [...]}.
    envelope: str | None = None
    max_tokens: int = 2000


_STRING_LIST = {"type": "ARRAY", "items": {"type": "STRING"}}

SKILLS_SCHEMA = {
    "type": "OBJECT",
    "properties": {"skills": _STRING_LIST},
    "required": ["skills"],
}

ROADMAP_SCHEMA = {
    "type": "ARRAY",
    "items": {
        "type": "OBJECT",
        "properties": {
            "step": {"type": "INTEGER"},
            "title": {"type": "STRING"},
            "description": {"type": "STRING"},
            "duration": {
                "type": "STRING",
                "description": "Estimated time to complete, e.g., '2 weeks'",
            },
            "resources": _STRING_LIST,
        },
        "required": ["step", "title", "description", "duration", "resources"],
    },
}

QUIZ_SCHEMA = {
    "type": "ARRAY",
    "items": {
        "type": "OBJECT",
        "properties": {
            "question": {"type": "STRING"},
            "codeSnippet": {
                "type": "STRING",
                "description": "Optional: Code block, formula, or scenario text context for the question.",
            },
            "options": _STRING_LIST,
            "correctAnswerIndex": {
                "type": "INTEGER",
                "description": "Zero-based index of the correct option (0-3)",
            },
        },
        "required": ["question", "options", "correctAnswerIndex"],
    },
}

MATCH_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "score": {"type": "INTEGER"},
        "reasoning": {"type": "STRING"},
        "commonInterests": {
            **_STRING_LIST,
            "description": "Shared keywords found in bios or skills",
        },
    },
    "required": ["score", "reasoning", "commonInterests"],
}

_PLAIN_JSON_RULES = """
- Do not include any markdown formatting or explanations
- Return only the JSON object"""


def _joined(values: list[str] | None) -> str:
    return ", ".join(value for value in (values or []) if value) or "None"


def build_skills_prompt(current_skills: list[str], current_goals: list[str]) -> Prompt:
    text = f"""Suggest 5 relevant skills based on the user's current skills and goals.

Current skills: [{_joined(current_skills)}]
Goals: [{_joined(current_goals)}]

Requirements:
- Suggest in-demand skills that complement current skills
- If they have learning goals, suggest prerequisites or related tools
- Do not include skills the user already knows or is already learning
- Focus on programming and technology skills
- Include modern, relevant technologies{_PLAIN_JSON_RULES}"""
    hint = '{\n  "skills": ["skill1", "skill2", "skill3", "skill4", "skill5"]\n}'
    return Prompt(
        kind=ContentKind.skills,
        text=text,
        schema=SKILLS_SCHEMA,
        format_hint=hint,
        envelope="skills",
        max_tokens=1000,
    )


def build_roadmap_prompt(skill: str) -> Prompt:
    text = f"""Generate a 6-step learning roadmap for {skill}.

Requirements:
- Create a progression from beginner to advanced
- Include practical projects and realistic timeframes
- Each step should have exactly 3 learning resources (books, docs, or search terms)
- Focus on practical learning outcomes
- Include hands-on projects and exercises{_PLAIN_JSON_RULES}"""
    hint = """{
  "roadmap": [
    {
      "step": number,
      "title": "string",
      "description": "string",
      "duration": "string (e.g., '1-2 weeks')",
      "resources": ["resource1", "resource2", "resource3"]
    }
  ]
}"""
    return Prompt(
        kind=ContentKind.roadmap,
        text=text,
        schema=ROADMAP_SCHEMA,
        format_hint=hint,
        envelope="roadmap",
    )


def _expert_quiz_text(skill: str) -> str:
    return f"""Generate 5 EXPERT-LEVEL multiple-choice questions SPECIFICALLY about "{skill}". Each question must test deep knowledge of this exact skill, not general programming concepts.

CRITICAL REQUIREMENTS:
1. SKILL-SPECIFIC FOCUS: Every question must be directly about {skill}. No generic programming questions.
2. EXPERT COMPLEXITY: Questions should challenge professionals with 3+ years of {skill} experience.
3. RELEVANT CODE SNIPPETS: All code snippets must use {skill} syntax, APIs, and patterns.
4. PRACTICAL EXPERTISE: Focus on real-world {skill} challenges, performance optimization, advanced features, and best practices.

QUESTION CATEGORIES FOR {skill}:
- Advanced {skill} features and edge cases
- Performance optimization specific to {skill}
- {skill} security considerations and vulnerabilities
- {skill} architectural patterns and best practices
- Complex debugging scenarios in {skill}
- {skill} tooling and ecosystem expertise

QUALITY STANDARDS:
- Each question must be unanswerable without {skill} knowledge
- Answer options should include common {skill} misconceptions
- Every question has exactly 4 options and one correct answer

Generate 5 questions that prove mastery of {skill} specifically."""


def _advanced_quiz_text(skill: str) -> str:
    return f"""Generate 5 ADVANCED-LEVEL multiple-choice questions SPECIFICALLY about "{skill}". Each question must test practical knowledge of this exact skill.

REQUIREMENTS:
1. SKILL-SPECIFIC: Every question must be directly about {skill}, not general concepts.
2. INTERMEDIATE-ADVANCED: Challenging for developers with 1-3 years of {skill} experience.
3. PRACTICAL CODE: Code snippets must use {skill} syntax and common patterns.
4. REAL-WORLD SCENARIOS: Focus on practical {skill} usage and common challenges.

Every question has exactly 4 options and one correct answer.
Generate 5 questions that test solid {skill} knowledge."""


def _intermediate_quiz_text(skill: str) -> str:
    return f"""Generate 5 INTERMEDIATE-LEVEL multiple-choice questions SPECIFICALLY about "{skill}". Each question must test fundamental knowledge of this exact skill.

REQUIREMENTS:
1. SKILL-FOCUSED: Every question must be about {skill} concepts and usage.
2. FOUNDATIONAL: Appropriate for developers with 6 months to 1 year of {skill} experience.
3. BASIC CODE: Include simple {skill} code examples where relevant.
4. CORE CONCEPTS: Focus on essential {skill} knowledge and common usage patterns.

Every question has exactly 4 options and one correct answer.
Generate 5 questions that test fundamental {skill} understanding."""


_QUIZ_TEXT_BUILDERS = {
    "expert": _expert_quiz_text,
    "advanced": _advanced_quiz_text,
    "intermediate": _intermediate_quiz_text,
}


def build_quiz_prompt(skill: str, difficulty: str = "expert") -> Prompt:
    builder = _QUIZ_TEXT_BUILDERS.get((difficulty or "").strip().lower())
    if builder is None:
        raise ValueError(f"Unknown quiz difficulty {difficulty!r}; expected one of {QUIZ_DIFFICULTIES}")
    hint = """{
  "questions": [
    {
      "question": "string",
      "codeSnippet": "string (optional)",
      "options": ["option1", "option2", "option3", "option4"],
      "correctAnswerIndex": 0
    }
  ]
}"""
    return Prompt(
        kind=ContentKind.quiz,
        text=builder(skill),
        schema=QUIZ_SCHEMA,
        format_hint=hint,
        envelope="questions",
    )


def format_known_skills(profile: UserProfile) -> str:
    entries = []
    for skill in profile.skills_known:
        if skill.verified:
            entries.append(f"{skill.name} (VERIFIED w/ Score: {skill.score or 70}%)")
        else:
            entries.append(skill.name)
    return ", ".join(entries) or "None"


def _profile_block(profile: UserProfile) -> str:
    return (
        f'\n    Bio: "{profile.bio}"'
        f"\n    Known Skills: {format_known_skills(profile)}"
        f"\n    Learning Goals: {_joined(profile.skills_to_learn)}\n"
    )


def build_match_prompt(first: UserProfile, second: UserProfile) -> Prompt:
    text = f"""Analyze the compatibility of these two users for a P2P skill exchange or job networking.

User 1 Profile: {_profile_block(first)}
User 2 Profile: {_profile_block(second)}

Determine a match score (0-100).

SCORING RULES:
1. CRITICAL: Skill Complementarity: Does User 2 know what User 1 wants to learn, OR does User 1 know what User 2 wants to learn?
2. VERIFIED SKILL PRIORITY: If a user is teaching a skill they are VERIFIED in (score > 70), this is the strongest matching factor.
   - If the teaching skill has a high verification score (e.g. >90), significantly boost the match score.
3. Reciprocity: If both users can teach each other something they want to learn, this is a perfect match (start at 80+).
4. Bio/Interest Analysis: Look for shared context (e.g., both into "frontend", "data science").

Output:
- score: (0-100)
- reasoning: Mention specific skills and if they are verified. Highlight high verification scores.
- commonInterests: List of 3-5 keywords/topics they have in common (from bios or tech stack)."""
    hint = '{\n  "score": 0,\n  "reasoning": "string",\n  "commonInterests": ["topic1", "topic2", "topic3"]\n}'
    return Prompt(
        kind=ContentKind.match,
        text=text,
        schema=MATCH_SCHEMA,
        format_hint=hint,
        max_tokens=1000,
    )
