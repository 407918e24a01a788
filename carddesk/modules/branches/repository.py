"""Repository protocol for branches."""

from __future__ import annotations

from typing import Protocol, Sequence

from .models import Branch


class BranchRepository(Protocol):
    async def get_by_id(self, branch_id: str) -> Branch | None:
        ...

    async def list_branches(self) -> Sequence[Branch]:
        ...

    async def create_branch(self, *, branch_id: str, branch_name: str, location: str) -> Branch:
        ...
