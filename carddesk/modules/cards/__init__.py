"""Card ledger exports."""

from .exceptions import CardAlreadyExistsError, CardNotFoundError
from .models import Card, CardCreateInput
from .service import CardService

__all__ = [
    "Card",
    "CardAlreadyExistsError",
    "CardCreateInput",
    "CardNotFoundError",
    "CardService",
]
