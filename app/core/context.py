"""Application context: the per-process object holding settings and pools.

Built once by create_app() and stored on app.state.context. Everything that
needs configuration or a database session receives it from here (via
dependencies or middleware arguments); nothing reads module-level globals.
"""

from dataclasses import dataclass

from app.core.config import Settings
from app.infrastructure.persistence.database import Database


@dataclass
class AppContext:
    """Settings plus writer/reader database pools for one process."""

    settings: Settings
    database: Database

    @classmethod
    def from_settings(cls, settings: Settings) -> "AppContext":
        return cls(settings=settings, database=Database(settings))
