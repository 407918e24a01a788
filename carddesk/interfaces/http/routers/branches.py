"""Branch directory endpoints."""
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from carddesk.core.security import TokenClaims
from carddesk.interfaces.http.deps import get_current_claims, get_db_session
from carddesk.modules.branches import Branch, BranchService
from carddesk.schemas import BranchCreate, BranchResponse

router = APIRouter()


def to_branch_response(branch: Branch) -> BranchResponse:
    return BranchResponse(
        branch_id=branch.branch_id,
        branch_name=branch.branch_name,
        location=branch.location,
        created_at=branch.created_at,
    )


@router.get("", response_model=list[BranchResponse], summary="List branches")
async def list_branches(
    claims: TokenClaims = Depends(get_current_claims),
    db: AsyncSession = Depends(get_db_session),
) -> list[BranchResponse]:
    return [to_branch_response(branch) for branch in await BranchService.with_session(db).list_all()]


@router.post("", response_model=BranchResponse, status_code=status.HTTP_201_CREATED, summary="Register a branch")
async def create_branch(
    payload: BranchCreate,
    claims: TokenClaims = Depends(get_current_claims),
    db: AsyncSession = Depends(get_db_session),
) -> BranchResponse:
    branch = await BranchService.with_session(db).create(
        branch_id=payload.branch_id,
        branch_name=payload.branch_name,
        location=payload.location,
    )
    await db.commit()
    return to_branch_response(branch)


@router.get("/{branch_id}", response_model=BranchResponse, summary="Get a branch")
async def get_branch(
    branch_id: str,
    claims: TokenClaims = Depends(get_current_claims),
    db: AsyncSession = Depends(get_db_session),
) -> BranchResponse:
    return to_branch_response(await BranchService.with_session(db).find_by_id(branch_id))
