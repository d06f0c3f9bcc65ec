from fastapi import APIRouter, Depends

from skillswap.api.deps import get_generator
from skillswap.schemas.api import MatchIn, QuizIn, RoadmapIn, SkillSuggestionIn
from skillswap.schemas.content import MatchAnalysis, Quiz, Roadmap, SkillSuggestions
from skillswap.services.content import ContentGenerator

router = APIRouter(prefix="/ai")


@router.post("/skills/suggest", response_model=SkillSuggestions)
async def suggest_skills(
    payload: SkillSuggestionIn,
    generator: ContentGenerator = Depends(get_generator),
):
    return await generator.suggest_skills(payload.current_skills, payload.current_goals)


@router.post("/roadmap", response_model=Roadmap)
async def learning_roadmap(
    payload: RoadmapIn,
    generator: ContentGenerator = Depends(get_generator),
):
    return await generator.generate_roadmap(payload.skill)


@router.post("/quiz", response_model=Quiz)
async def skill_quiz(
    payload: QuizIn,
    generator: ContentGenerator = Depends(get_generator),
):
    return await generator.generate_quiz(payload.skill, payload.difficulty)


@router.post("/match", response_model=MatchAnalysis)
async def match_profiles(
    payload: MatchIn,
    generator: ContentGenerator = Depends(get_generator),
):
    return await generator.analyze_match(payload.first, payload.second)
