from typing import List, Literal

from pydantic import Field

from skillswap.schemas.content import CamelModel, NonEmptyStr, UserProfile


class SkillSuggestionIn(CamelModel):
    current_skills: List[str] = Field(default_factory=list, alias="currentSkills")
    current_goals: List[str] = Field(default_factory=list, alias="currentGoals")


class RoadmapIn(CamelModel):
    skill: NonEmptyStr


class QuizIn(CamelModel):
    skill: NonEmptyStr
    difficulty: Literal["expert", "advanced", "intermediate"] = "expert"


class MatchIn(CamelModel):
    first: UserProfile
    second: UserProfile
