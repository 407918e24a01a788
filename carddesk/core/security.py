"""JWT helpers for signed, time-limited session tokens."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Iterable, Optional

from jose import JWTError, jwt
from jose.exceptions import ExpiredSignatureError

from carddesk.core.config import SecuritySettings
from carddesk.core.exceptions import ExpiredTokenError, InvalidTokenError


@dataclass(frozen=True, slots=True)
class TokenClaims:
    employee_id: str
    name: str
    permissions: frozenset[str]
    issued_at: datetime
    expires_at: datetime

    def has_permission(self, permission: str) -> bool:
        return permission in self.permissions


def create_access_token(
    settings: SecuritySettings,
    employee_id: str,
    name: str,
    permissions: Iterable[str],
    expires_delta: Optional[timedelta] = None,
    now: Optional[datetime] = None,
) -> tuple[str, datetime]:
    """Sign a token for ``employee_id``; returns the token and its expiry."""
    issued_at = now or datetime.now(timezone.utc)
    expires_at = issued_at + (expires_delta or timedelta(minutes=settings.access_token_expire_minutes))
    payload = {
        "sub": employee_id,
        "name": name,
        "permissions": sorted(permissions),
        "iat": issued_at,
        "exp": expires_at,
    }
    return jwt.encode(payload, settings.secret_key, algorithm=settings.algorithm), expires_at


def decode_access_token(settings: SecuritySettings, token: str) -> TokenClaims:
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except ExpiredSignatureError as exc:
        raise ExpiredTokenError() from exc
    except JWTError as exc:
        raise InvalidTokenError() from exc

    employee_id = payload.get("sub")
    permissions = payload.get("permissions")
    if not employee_id or not isinstance(permissions, list) or "exp" not in payload:
        raise InvalidTokenError()
    return TokenClaims(
        employee_id=employee_id,
        name=payload.get("name") or "",
        permissions=frozenset(str(item) for item in permissions),
        issued_at=datetime.fromtimestamp(payload.get("iat", payload["exp"]), tz=timezone.utc),
        expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
    )


__all__ = ["TokenClaims", "create_access_token", "decode_access_token"]
