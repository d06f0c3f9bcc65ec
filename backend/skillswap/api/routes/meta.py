from fastapi import APIRouter, Depends

from skillswap.api.deps import get_database, get_generator, get_settings_dep
from skillswap.core.config import Settings
from skillswap.core.database import Database
from skillswap.services.content import ContentGenerator

router = APIRouter(prefix="/meta")


def _ai_status(settings: Settings, generator: ContentGenerator) -> dict:
    client = generator.client
    return {
        "ai_enabled": generator.ai_enabled,
        "provider": client.name if client else settings.llm_provider,
        "model": client.model if client else None,
        "strict_mode": generator.strict,
    }


@router.get("/ai")
def ai_meta(
    settings: Settings = Depends(get_settings_dep),
    generator: ContentGenerator = Depends(get_generator),
):
    return _ai_status(settings, generator)


@router.get("/health")
def health_meta(
    settings: Settings = Depends(get_settings_dep),
    generator: ContentGenerator = Depends(get_generator),
    database: Database | None = Depends(get_database),
):
    db_ok = False
    db_error = None
    if database is None:
        db_error = "DATABASE_URL is not configured"
    else:
        try:
            db_ok = database.ping()
        except Exception as exc:
            db_error = str(exc)
    return {
        "ok": db_ok,
        "database": {"ok": db_ok, "error": db_error},
        "ai": _ai_status(settings, generator),
    }
