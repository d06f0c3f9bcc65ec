from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Annotated, Any, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, model_validator

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

SKILL_SUGGESTION_COUNT = 5
QUIZ_QUESTION_COUNT = 5
ROADMAP_MIN_STEPS = 5
ROADMAP_MAX_STEPS = 6
ROADMAP_RESOURCES_PER_STEP = 3


class ContentKind(str, Enum):
    skills = "skills"
    roadmap = "roadmap"
    quiz = "quiz"
    match = "match"


class CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class SkillSuggestions(CamelModel):
    skills: List[NonEmptyStr] = Field(
        min_length=SKILL_SUGGESTION_COUNT, max_length=SKILL_SUGGESTION_COUNT
    )


class RoadmapStep(CamelModel):
    step: int = Field(ge=1)
    title: NonEmptyStr
    description: NonEmptyStr
    duration: NonEmptyStr
    resources: List[NonEmptyStr] = Field(
        min_length=ROADMAP_RESOURCES_PER_STEP, max_length=ROADMAP_RESOURCES_PER_STEP
    )


class Roadmap(CamelModel):
    steps: List[RoadmapStep] = Field(min_length=ROADMAP_MIN_STEPS, max_length=ROADMAP_MAX_STEPS)


class QuizQuestion(CamelModel):
    question: NonEmptyStr
    code_snippet: Optional[str] = Field(default=None, alias="codeSnippet")
    options: List[NonEmptyStr] = Field(min_length=2)
    correct_answer_index: int = Field(alias="correctAnswerIndex")

    @model_validator(mode="after")
    def check_answer_index(self) -> "QuizQuestion":
        if not 0 <= self.correct_answer_index < len(self.options):
            raise ValueError(
                f"correctAnswerIndex {self.correct_answer_index} outside 0..{len(self.options) - 1}"
            )
        return self


class Quiz(CamelModel):
    questions: List[QuizQuestion] = Field(
        min_length=QUIZ_QUESTION_COUNT, max_length=QUIZ_QUESTION_COUNT
    )


class MatchAnalysis(CamelModel):
    score: int = Field(ge=0, le=100)
    reasoning: NonEmptyStr
    common_interests: List[NonEmptyStr] = Field(default_factory=list, alias="commonInterests")


class KnownSkill(CamelModel):
    name: NonEmptyStr
    verified: bool = False
    score: Optional[int] = Field(default=None, ge=0, le=100)


class UserProfile(CamelModel):
    bio: str = ""
    skills_known: List[KnownSkill] = Field(default_factory=list, alias="skillsKnown")
    skills_to_learn: List[str] = Field(default_factory=list, alias="skillsToLearn")


GenerationResult = Union[SkillSuggestions, Roadmap, Quiz, MatchAnalysis]


@dataclass(frozen=True)
class GenerationRequest:
    """One generation call.

    Parameters by kind:
      skills:  current_skills (list[str]), current_goals (list[str])
      roadmap: skill (str)
      quiz:    skill (str), difficulty (str, optional)
      match:   first, second (UserProfile or a mapping that validates as one)
    """

    kind: ContentKind
    parameters: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", ContentKind(self.kind))
        object.__setattr__(self, "parameters", MappingProxyType(dict(self.parameters)))
