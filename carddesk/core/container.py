"""Simple dependency container for wiring core services."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from carddesk.core.config import Settings
from carddesk.infrastructure.database.session import build_engine, build_session_factory, init_db


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    engine: AsyncEngine
    session_factory: async_sessionmaker[AsyncSession]

    @classmethod
    def from_settings(cls, settings: Settings) -> "ApplicationContainer":
        engine = build_engine(settings)
        return cls(settings=settings, engine=engine, session_factory=build_session_factory(engine))

    async def startup(self) -> None:
        await init_db(self.engine)

    async def shutdown(self) -> None:
        await self.engine.dispose()


__all__ = ["ApplicationContainer"]
