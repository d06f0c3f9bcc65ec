from pathlib import Path
import asyncio
import json
import sys

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from skillswap.core.errors import ContentGenerationError, ErrorKind, ProviderError
from skillswap.schemas.content import GenerationRequest, Quiz, UserProfile
from skillswap.services.content import ContentGenerator, parse_generation_result
from skillswap.services.fallback_content import CANONICAL_QUIZZES
from skillswap.services.prompts import build_quiz_prompt, build_roadmap_prompt


class FakeClient:
    name = "fake"
    model = "fake-1"

    def __init__(self, *responses):
        self.responses = list(responses)
        self.prompts = []

    @property
    def calls(self):
        return len(self.prompts)

    async def complete(self, prompt):
        self.prompts.append(prompt)
        outcome = self.responses[min(self.calls, len(self.responses)) - 1]
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


async def _no_sleep(delay):
    return None


def _generator(client, **kwargs):
    return ContentGenerator(client, sleep=_no_sleep, base_delay=0.0, **kwargs)


def _quiz_payload(prefix="Q"):
    return [
        {
            "question": f"{prefix} {index}?",
            "codeSnippet": "x = 1",
            "options": ["a", "b", "c", "d"],
            "correctAnswerIndex": index % 4,
        }
        for index in range(5)
    ]


def _roadmap_payload(resources=3):
    return [
        {
            "step": index,
            "title": f"Step {index}",
            "description": "Do the thing",
            "duration": "1 week",
            "resources": [f"Resource {n}" for n in range(resources)],
        }
        for index in range(1, 7)
    ]


def test_code_fenced_quiz_is_parsed():
    raw = "```json\n" + json.dumps(_quiz_payload("Model")) + "\n```"
    client = FakeClient(raw)
    quiz = asyncio.run(_generator(client).generate_quiz("Rust", "advanced"))
    assert client.calls == 1
    assert quiz.questions[0].question == "Model 0?"
    assert quiz.questions[3].correct_answer_index == 3
    assert "ADVANCED-LEVEL" in client.prompts[0].text


def test_enveloped_roadmap_is_unwrapped():
    client = FakeClient(json.dumps({"roadmap": _roadmap_payload()}))
    roadmap = asyncio.run(_generator(client).generate_roadmap("Rust"))
    assert len(roadmap.steps) == 6
    assert roadmap.steps[0].title == "Step 1"


def test_roadmap_with_wrong_resource_count_falls_back_without_retry():
    client = FakeClient(json.dumps(_roadmap_payload(resources=2)))
    roadmap = asyncio.run(_generator(client).generate_roadmap("Rust"))
    assert client.calls == 1
    assert roadmap.steps[0].title == "Getting Started with Rust"


def test_malformed_skills_response_falls_back():
    client = FakeClient("Sure! Here are some skills you might like.")
    result = asyncio.run(_generator(client).suggest_skills(["Docker"], ["Go"]))
    assert len(result.skills) == 5
    assert "Docker" not in result.skills


def test_skills_object_answer_is_accepted():
    payload = {"skills": ["Rust", "Go", "Kotlin", "Elixir", "Zig"]}
    client = FakeClient("Here you go: " + json.dumps(payload) + " Enjoy!")
    result = asyncio.run(_generator(client).suggest_skills([], []))
    assert result.skills == payload["skills"]


def test_fatal_provider_error_falls_back_after_one_call():
    client = FakeClient(ProviderError("bad key", kind=ErrorKind.fatal, status_code=401))
    quiz = asyncio.run(_generator(client).generate_quiz("java"))
    assert client.calls == 1
    assert quiz == Quiz.model_validate({"questions": CANONICAL_QUIZZES["java"]})


def test_transient_errors_use_every_attempt_then_fall_back():
    client = FakeClient(ProviderError("server error", kind=ErrorKind.transient, status_code=500))
    quiz = asyncio.run(_generator(client, max_retries=3).generate_quiz("python"))
    assert client.calls == 3
    assert quiz == Quiz.model_validate({"questions": CANONICAL_QUIZZES["python"]})


def test_unavailable_then_success_returns_model_content():
    client = FakeClient(
        ProviderError("overloaded", kind=ErrorKind.unavailable, status_code=503),
        json.dumps(_quiz_payload()),
    )
    quiz = asyncio.run(_generator(client).generate_quiz("Rust"))
    assert client.calls == 2
    assert quiz.questions[0].question == "Q 0?"


def test_strict_mode_raises_instead_of_falling_back():
    client = FakeClient("not json")
    generator = _generator(client, strict=True)
    with pytest.raises(ContentGenerationError) as excinfo:
        asyncio.run(generator.generate_roadmap("Rust"))
    assert excinfo.value.kind == "roadmap"


def test_strict_mode_without_client_raises():
    with pytest.raises(ContentGenerationError):
        asyncio.run(_generator(None, strict=True).generate_quiz("java"))


def test_disabled_ai_serves_fallback():
    generator = _generator(None)
    assert generator.ai_enabled is False
    quiz = asyncio.run(generator.generate_quiz("react"))
    assert len(quiz.questions) == 5


def test_match_failure_returns_neutral_analysis():
    client = FakeClient(RuntimeError("timeout"))
    first = UserProfile(bio="Loves Python", skillsKnown=[{"name": "Python", "verified": True, "score": 90}])
    second = UserProfile(bio="Wants Python", skillsToLearn=["Python"])
    analysis = asyncio.run(_generator(client, strict=True).analyze_match(first, second))
    assert analysis.score == 50
    assert analysis.reasoning == "AI analysis unavailable."
    assert analysis.common_interests == []


def test_match_success_is_validated():
    payload = {"score": 82, "reasoning": "Complementary skills.", "commonInterests": ["Python"]}
    client = FakeClient(json.dumps(payload))
    analysis = asyncio.run(_generator(client).analyze_match(UserProfile(), UserProfile()))
    assert analysis.score == 82
    assert analysis.common_interests == ["Python"]
    assert "Known Skills: None" in client.prompts[0].text


def test_match_score_out_of_range_is_neutral():
    client = FakeClient(json.dumps({"score": 140, "reasoning": "Great", "commonInterests": []}))
    analysis = asyncio.run(_generator(client).analyze_match(UserProfile(), UserProfile()))
    assert analysis.score == 50


def test_generate_dispatches_request_kind():
    generator = _generator(None)
    quiz = asyncio.run(generator.generate(GenerationRequest(kind="quiz", parameters={"skill": "git"})))
    assert quiz == Quiz.model_validate({"questions": CANONICAL_QUIZZES["git"]})
    skills = asyncio.run(
        generator.generate(GenerationRequest(kind="skills", parameters={"current_skills": ["AWS"]}))
    )
    assert "AWS" not in skills.skills
    match = asyncio.run(
        generator.generate(GenerationRequest(kind="match", parameters={"first": {}, "second": {}}))
    )
    assert match.score == 50


def test_generate_rejects_missing_parameters():
    with pytest.raises(ValueError):
        asyncio.run(_generator(None).generate(GenerationRequest(kind="roadmap", parameters={})))


def test_parse_rejects_object_where_list_expected():
    prompt = build_roadmap_prompt("Rust")
    with pytest.raises(ValueError):
        parse_generation_result(prompt, json.dumps({"steps": "none"}))


def test_parse_rejects_out_of_range_answer_index():
    payload = _quiz_payload()
    payload[2]["correctAnswerIndex"] = 4
    with pytest.raises(ValueError):
        parse_generation_result(build_quiz_prompt("Rust"), json.dumps(payload))
