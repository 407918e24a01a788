"""Bearer token and permission dependencies."""

from typing import Callable, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from carddesk.core.config import Settings
from carddesk.core.exceptions import AuthenticationError, PermissionDeniedError
from carddesk.core.security import TokenClaims
from carddesk.modules.auth import AuthService

from .database import get_app_settings, get_db_session

# auto_error is off so a missing header goes through the same 401 path as a bad token.
bearer_scheme = HTTPBearer(auto_error=False)


def get_current_claims(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_app_settings),
    db: AsyncSession = Depends(get_db_session),
) -> TokenClaims:
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("No token provided")
    return AuthService.with_session(db, settings).verify(credentials.credentials)


def require_permission(permission: str) -> Callable[..., TokenClaims]:
    def dependency(claims: TokenClaims = Depends(get_current_claims)) -> TokenClaims:
        if not claims.has_permission(permission):
            raise PermissionDeniedError()
        return claims

    return dependency


__all__ = ["bearer_scheme", "get_current_claims", "require_permission"]
