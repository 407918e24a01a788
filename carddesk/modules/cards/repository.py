"""Repository protocol for the card ledger."""

from __future__ import annotations

from typing import Protocol, Sequence

from .models import Card


class CardRepository(Protocol):
    async def get_by_number(self, card_number: str) -> Card | None:
        """Return the current committed view of the card, bypassing any cached copy."""
        ...

    async def list_cards(self) -> Sequence[Card]:
        ...

    async def create_card(self, *, card_number: str, holder_name: str, balance_cents: int) -> Card:
        """Insert a card; raises ``CardAlreadyExistsError`` on a unique violation."""
        ...

    async def compare_and_set_balance(self, card_number: str, *, expected_cents: int, new_cents: int) -> bool:
        """Set the balance only if it still equals ``expected_cents``; report whether it did."""
        ...
