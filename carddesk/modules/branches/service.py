"""Branch registry service."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession


from .exceptions import BranchNotFoundError
from .models import Branch
from .repository import BranchRepository


@dataclass(slots=True)
class BranchService:
    repository: BranchRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "BranchService":
        from carddesk.infrastructure.database.repositories.branch_repository import SqlBranchRepository

        return cls(SqlBranchRepository(session))

    async def create(self, *, branch_id: str, branch_name: str, location: str) -> Branch:
        return await self.repository.create_branch(branch_id=branch_id, branch_name=branch_name, location=location)

    async def list_all(self) -> list[Branch]:
        return list(await self.repository.list_branches())

    async def find_by_id(self, branch_id: str) -> Branch:
        branch = await self.repository.get_by_id(branch_id)
        if branch is None:
            raise BranchNotFoundError()
        return branch
