from fastapi import APIRouter

from carddesk.interfaces.http.routers import auth, branches, cards, employees, withdrawals


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(auth.router, tags=["auth"])
    router.include_router(cards.router, prefix="/cards", tags=["cards"])
    router.include_router(withdrawals.router, tags=["withdrawals"])
    router.include_router(employees.router, prefix="/employees", tags=["employees"])
    router.include_router(branches.router, prefix="/branches", tags=["branches"])
    return router


__all__ = [
    "create_api_router",
]
