from collections.abc import Mapping, Sequence
from typing import Any

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine

from skillswap.core.config import Settings
from skillswap.core.errors import ConfigurationError


class Database:
    """Connection pool shared by the whole process, created once at startup."""

    def __init__(self, url: str, **engine_kwargs: Any):
        self.engine: Engine = create_engine(url, pool_pre_ping=True, **engine_kwargs)

    def query(
        self,
        sql: str,
        params: Sequence[Any] | Mapping[str, Any] | None = None,
    ) -> list[dict[str, Any]]:
        # Only mappings go through text() and its ":param" parsing; everything else
        # reaches the driver untouched, in its own paramstyle ("?" or "%s").
        with self.engine.begin() as conn:
            if isinstance(params, Mapping):
                result = conn.execute(text(sql), dict(params))
            elif params is None:
                result = conn.exec_driver_sql(sql)
            else:
                result = conn.exec_driver_sql(sql, tuple(params))
            if not result.returns_rows:
                return []
            return [dict(row._mapping) for row in result]

    def ping(self) -> bool:
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True

    def dispose(self) -> None:
        self.engine.dispose()


def create_database(settings: Settings) -> Database:
    if not settings.database_url:
        raise ConfigurationError("DATABASE_URL is not configured")
    return Database(settings.database_url)
