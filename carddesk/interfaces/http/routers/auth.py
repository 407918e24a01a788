"""Employee registration and login endpoints."""
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from carddesk.core.config import Settings
from carddesk.interfaces.http.deps import get_app_settings, get_db_session
from carddesk.modules.auth import AuthService
from carddesk.modules.employees import EmployeeCreateInput, EmployeeService
from carddesk.schemas import EmployeeResponse, LoginRequest, LoginResponse, RegisterRequest

from .employees import to_employee_response

router = APIRouter()


@router.post(
    "/register",
    response_model=EmployeeResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register an employee",
)
async def register(
    payload: RegisterRequest,
    db: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_app_settings),
) -> EmployeeResponse:
    service = EmployeeService.with_session(db, settings)
    employee = await service.register(
        EmployeeCreateInput(
            employee_id=payload.employee_id,
            name=payload.name,
            email=payload.email,
            password=payload.password,
        )
    )
    await db.commit()
    return to_employee_response(employee)


@router.post("/login", response_model=LoginResponse, summary="Log in and receive a bearer token")
async def login(
    payload: LoginRequest,
    db: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_app_settings),
) -> LoginResponse:
    issued = await AuthService.with_session(db, settings).login(payload.email, payload.password)
    return LoginResponse(
        token=issued.token,
        employee_id=issued.employee.employee_id,
        name=issued.employee.name,
        expires_at=issued.expires_at,
    )
