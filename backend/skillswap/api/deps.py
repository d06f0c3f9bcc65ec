from fastapi import Request

from skillswap.core.config import Settings
from skillswap.core.database import Database
from skillswap.services.content import ContentGenerator


def get_settings_dep(request: Request) -> Settings:
    return request.app.state.settings


def get_generator(request: Request) -> ContentGenerator:
    return request.app.state.generator


def get_database(request: Request) -> Database | None:
    return request.app.state.database
