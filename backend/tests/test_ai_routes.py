from pathlib import Path
import json
import sys

from fastapi.testclient import TestClient

sys.path.append(str(Path(__file__).resolve().parents[1]))

from skillswap.api.deps import get_generator
from skillswap.core.config import Settings
from skillswap.main import create_app
from skillswap.services.content import ContentGenerator


class CannedClient:
    name = "canned"
    model = "canned-1"

    def __init__(self, answer):
        self.answer = answer
        self.prompts = []

    async def complete(self, prompt):
        self.prompts.append(prompt)
        return self.answer


def _offline_app(**overrides):
    values = {"ai_enabled": False, "database_url": None}
    values.update(overrides)
    return create_app(Settings(_env_file=None, **values))


def test_quiz_fallback_served_on_both_prefixes():
    with TestClient(_offline_app()) as client:
        plain = client.post("/ai/quiz", json={"skill": "java"})
        prefixed = client.post("/api/ai/quiz", json={"skill": "java", "difficulty": "advanced"})
    assert plain.status_code == 200
    assert prefixed.status_code == 200
    assert plain.json() == prefixed.json()
    questions = plain.json()["questions"]
    assert len(questions) == 5
    assert "correctAnswerIndex" in questions[0]
    assert "codeSnippet" in questions[0]


def test_unknown_difficulty_is_rejected():
    with TestClient(_offline_app()) as client:
        response = client.post("/ai/quiz", json={"skill": "java", "difficulty": "trivial"})
    assert response.status_code == 422


def test_blank_skill_is_rejected():
    with TestClient(_offline_app()) as client:
        response = client.post("/ai/roadmap", json={"skill": "   "})
    assert response.status_code == 422


def test_roadmap_and_skills_fallbacks():
    with TestClient(_offline_app()) as client:
        roadmap = client.post("/ai/roadmap", json={"skill": "Rust"}).json()
        skills = client.post(
            "/ai/skills/suggest",
            json={"currentSkills": ["Docker"], "currentGoals": ["AWS"]},
        ).json()
    assert len(roadmap["steps"]) == 6
    assert roadmap["steps"][0]["title"] == "Getting Started with Rust"
    assert len(skills["skills"]) == 5
    assert "Docker" not in skills["skills"]
    assert "AWS" not in skills["skills"]


def test_match_without_ai_is_neutral():
    body = {
        "first": {"bio": "Frontend dev", "skillsKnown": [{"name": "React", "verified": True, "score": 95}]},
        "second": {"bio": "Learning frontend", "skillsToLearn": ["React"]},
    }
    with TestClient(_offline_app()) as client:
        response = client.post("/ai/match", json=body)
    assert response.status_code == 200
    assert response.json() == {
        "score": 50,
        "reasoning": "AI analysis unavailable.",
        "commonInterests": [],
    }


def test_strict_mode_maps_failure_to_bad_gateway():
    with TestClient(_offline_app(ai_strict_mode=True)) as client:
        response = client.post("/ai/roadmap", json={"skill": "Rust"})
    assert response.status_code == 502
    payload = response.json()
    assert payload["kind"] == "roadmap"
    assert payload["detail"].startswith("Failed to generate roadmap")


def test_model_answer_flows_through_route():
    canned = CannedClient(json.dumps({"skills": ["Rust", "Go", "Kotlin", "Elixir", "Zig"]}))
    generator = ContentGenerator(canned)
    app = _offline_app()
    app.dependency_overrides[get_generator] = lambda: generator
    with TestClient(app) as client:
        response = client.post("/ai/skills/suggest", json={"currentSkills": ["Python"]})
    assert response.status_code == 200
    assert response.json() == {"skills": ["Rust", "Go", "Kotlin", "Elixir", "Zig"]}
    assert "Python" in canned.prompts[0].text


def test_request_id_is_echoed():
    with TestClient(_offline_app()) as client:
        response = client.get("/meta/ai", headers={"X-Request-Id": "abc123"})
        generated = client.get("/meta/ai")
    assert response.headers["X-Request-Id"] == "abc123"
    assert generated.headers["X-Request-Id"]
