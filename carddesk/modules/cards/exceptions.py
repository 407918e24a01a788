"""Card ledger exceptions."""

from carddesk.core.exceptions import DuplicateError, NotFoundError


class CardAlreadyExistsError(DuplicateError):
    default_message = "Card already exists"


class CardNotFoundError(NotFoundError):
    default_message = "Card not found"
