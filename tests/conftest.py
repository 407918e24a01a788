"""Shared fixtures: isolated settings, a live app client and in-memory repositories."""

from __future__ import annotations

import asyncio
from dataclasses import replace
from datetime import datetime, timezone
from typing import Iterable

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from carddesk.core.config import DatabaseSettings, SecuritySettings, Settings
from carddesk.core.container import ApplicationContainer
from carddesk.core.security import TokenClaims
from carddesk.main import create_app
from carddesk.modules.cards.exceptions import CardAlreadyExistsError
from carddesk.modules.cards.models import Card
from carddesk.modules.employees.exceptions import EmployeeAlreadyExistsError, EmployeeNotFoundError
from carddesk.modules.employees.models import PROCESS_DEPOSIT, PROCESS_WITHDRAWAL, Employee
from carddesk.modules.transactions.models import TransactionRecord

TEST_SECRET = "test-secret-key-0123456789abcdef"


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        environment="test",
        static_dir=tmp_path / "no-static",
        database=DatabaseSettings(url=f"sqlite+aiosqlite:///{tmp_path / 'carddesk.db'}"),
        security=SecuritySettings(secret_key=TEST_SECRET, bcrypt_rounds=4),
    )


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest_asyncio.fixture
async def container(settings):
    container = ApplicationContainer.from_settings(settings)
    await container.startup()
    yield container
    await container.shutdown()


def register(client: TestClient, employee_id: str = "E001", email: str = "alice@example.com", password: str = "secret123", name: str = "Alice"):
    return client.post(
        "/api/register",
        json={"employeeId": employee_id, "name": name, "email": email, "password": password},
    )


def login(client: TestClient, email: str = "alice@example.com", password: str = "secret123") -> str:
    response = client.post("/api/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return response.json()["token"]


@pytest.fixture
def auth_headers(client) -> dict[str, str]:
    assert register(client).status_code == 201
    return {"Authorization": f"Bearer {login(client)}"}


def make_claims(*permissions: str, employee_id: str = "E001") -> TokenClaims:
    now = datetime.now(timezone.utc)
    return TokenClaims(
        employee_id=employee_id,
        name="Test",
        permissions=frozenset(permissions),
        issued_at=now,
        expires_at=now,
    )


@pytest.fixture
def teller_claims() -> TokenClaims:
    return make_claims(PROCESS_WITHDRAWAL)


@pytest.fixture
def supervisor_claims() -> TokenClaims:
    return make_claims(PROCESS_WITHDRAWAL, PROCESS_DEPOSIT)


class InMemoryEmployeeRepository:
    def __init__(self) -> None:
        self.employees: dict[str, Employee] = {}

    async def get_by_employee_id(self, employee_id: str) -> Employee | None:
        return self.employees.get(employee_id)

    async def get_by_email(self, email: str) -> Employee | None:
        return next((e for e in self.employees.values() if e.email == email), None)

    async def create_employee(self, *, employee_id, name, email, password_hash, permissions: Iterable[str]) -> Employee:
        if employee_id in self.employees or await self.get_by_email(email) is not None:
            raise EmployeeAlreadyExistsError()
        employee = Employee(
            employee_id=employee_id,
            name=name,
            email=email,
            permissions=frozenset(permissions),
            password_hash=password_hash,
        )
        self.employees[employee_id] = employee
        return employee

    async def set_permissions(self, employee_id: str, permissions: Iterable[str]) -> Employee:
        if employee_id not in self.employees:
            raise EmployeeNotFoundError()
        employee = replace(self.employees[employee_id], permissions=frozenset(permissions))
        self.employees[employee_id] = employee
        return employee


class InMemoryCardRepository:
    """Card store that yields to the event loop between a read and the next write.

    The yield lets concurrently scheduled movements interleave exactly where a
    lost update would happen.
    """

    def __init__(self) -> None:
        self.cards: dict[str, Card] = {}
        self.cas_attempts = 0

    async def get_by_number(self, card_number: str) -> Card | None:
        card = self.cards.get(card_number)
        snapshot = replace(card) if card else None
        await asyncio.sleep(0)
        return snapshot

    async def list_cards(self) -> list[Card]:
        return [replace(card) for card in self.cards.values()]

    async def create_card(self, *, card_number: str, holder_name: str, balance_cents: int) -> Card:
        if card_number in self.cards:
            raise CardAlreadyExistsError()
        card = Card(card_number=card_number, holder_name=holder_name, balance_cents=balance_cents)
        self.cards[card_number] = card
        return replace(card)

    async def compare_and_set_balance(self, card_number: str, *, expected_cents: int, new_cents: int) -> bool:
        self.cas_attempts += 1
        card = self.cards[card_number]
        if card.balance_cents != expected_cents:
            return False
        card.balance_cents = new_cents
        return True


class InMemoryTransactionRepository:
    def __init__(self) -> None:
        self.records: list[TransactionRecord] = []

    async def add(self, record: TransactionRecord) -> TransactionRecord:
        self.records.append(record)
        return record

    async def list_for_card(self, card_number: str) -> list[TransactionRecord]:
        return [r for r in reversed(self.records) if r.card_number == card_number]


@pytest.fixture
def employee_repo() -> InMemoryEmployeeRepository:
    return InMemoryEmployeeRepository()


@pytest.fixture
def card_repo() -> InMemoryCardRepository:
    return InMemoryCardRepository()


@pytest.fixture
def transaction_repo() -> InMemoryTransactionRepository:
    return InMemoryTransactionRepository()
