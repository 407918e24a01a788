"""Error taxonomy shared by the domain modules.

Each class carries a human-readable message; the HTTP layer maps the class to
a status code in :mod:`carddesk.interfaces.http.errors`.
"""


class CardDeskError(Exception):
    """Base class for all business-rule violations."""

    default_message = "Request failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(CardDeskError):
    default_message = "Invalid request"


class DuplicateError(CardDeskError):
    default_message = "Resource already exists"


class AuthenticationError(CardDeskError):
    default_message = "Authentication required"


class InvalidCredentialsError(AuthenticationError):
    default_message = "Invalid credentials"


class InvalidTokenError(AuthenticationError):
    default_message = "Invalid token"


class ExpiredTokenError(InvalidTokenError):
    default_message = "Token has expired"


class PermissionDeniedError(CardDeskError):
    default_message = "Permission denied"


class NotFoundError(CardDeskError):
    default_message = "Resource not found"


class InsufficientBalanceError(CardDeskError):
    default_message = "Insufficient balance"


class ConcurrentUpdateError(CardDeskError):
    """Raised when a balance kept changing underneath every retry."""

    default_message = "Card balance changed concurrently, please retry"


class AmountOutOfRangeError(ValidationError):
    default_message = "Amount exceeds the supported maximum"
