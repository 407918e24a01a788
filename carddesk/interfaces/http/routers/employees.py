"""Employee lookup endpoints."""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from carddesk.core.config import Settings
from carddesk.core.security import TokenClaims
from carddesk.interfaces.http.deps import get_app_settings, get_current_claims, get_db_session
from carddesk.modules.employees import Employee, EmployeeService
from carddesk.schemas import EmployeeResponse

router = APIRouter()


def to_employee_response(employee: Employee) -> EmployeeResponse:
    return EmployeeResponse(
        employee_id=employee.employee_id,
        name=employee.name,
        email=employee.email,
        permissions=sorted(employee.permissions),
        created_at=employee.created_at,
    )


@router.get("/{employee_id}", response_model=EmployeeResponse, summary="Get an employee (without credentials)")
async def get_employee(
    employee_id: str,
    claims: TokenClaims = Depends(get_current_claims),
    db: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_app_settings),
) -> EmployeeResponse:
    employee = await EmployeeService.with_session(db, settings).find_by_employee_id(employee_id)
    return to_employee_response(employee)
