"""Authentication exports."""

from .models import IssuedToken
from .service import AuthService

__all__ = ["AuthService", "IssuedToken"]
