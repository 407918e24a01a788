"""SQLAlchemy implementation for the branch registry"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from carddesk.db.models import Branch as BranchModel
from carddesk.modules.branches.exceptions import BranchAlreadyExistsError
from carddesk.modules.branches.models import Branch


class SqlBranchRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_by_id(self, branch_id: str) -> Branch | None:
        model = await self.session.get(BranchModel, branch_id)
        return self._to_domain(model) if model else None

    async def list_branches(self) -> list[Branch]:
        result = await self.session.execute(select(BranchModel).order_by(BranchModel.branch_id))
        return [self._to_domain(model) for model in result.scalars().all()]

    async def create_branch(self, *, branch_id: str, branch_name: str, location: str) -> Branch:
        model = BranchModel(branch_id=branch_id, branch_name=branch_name, location=location)
        self.session.add(model)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            await self.session.rollback()
            raise BranchAlreadyExistsError() from exc
        await self.session.refresh(model)
        return self._to_domain(model)

    @staticmethod
    def _to_domain(model: BranchModel) -> Branch:
        return Branch(
            branch_id=model.branch_id,
            branch_name=model.branch_name,
            location=model.location,
            created_at=model.created_at,
        )
