"""Pydantic schemas used across the project.

JSON bodies use camelCase field names; Python code uses snake_case.
"""
from datetime import datetime
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

# Monetary amounts are JSON numbers on the wire.
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class RegisterRequest(CamelModel):
    employee_id: str = Field(..., min_length=1, max_length=64)
    name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., max_length=255, pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=6)


class EmployeeResponse(CamelModel):
    employee_id: str
    name: str
    email: str
    permissions: list[str]
    created_at: Optional[datetime] = None


class LoginRequest(CamelModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class LoginResponse(CamelModel):
    token: str
    token_type: str = "bearer"
    employee_id: str
    name: str
    expires_at: datetime


class CardCreate(CamelModel):
    card_number: str = Field(..., min_length=1, max_length=32)
    holder_name: str = Field(..., min_length=1, max_length=100)
    initial_balance: Optional[Decimal] = Field(default=None, ge=0, decimal_places=2)


class CardResponse(CamelModel):
    card_number: str
    holder_name: str
    balance: Money
    created_at: Optional[datetime] = None


class BalanceMovementRequest(CamelModel):
    card_number: str = Field(..., min_length=1, max_length=32)
    amount: Decimal = Field(..., gt=0, decimal_places=2)
    branch_id: str = Field(..., min_length=1, max_length=64)


class BalanceMovementResponse(CamelModel):
    new_balance: Money
    transaction_id: str


class TransactionResponse(CamelModel):
    transaction_id: str
    card_number: str
    amount: Money
    branch_id: str
    type: str
    timestamp: datetime


class BranchCreate(CamelModel):
    branch_id: str = Field(..., min_length=1, max_length=64)
    branch_name: str = Field(..., min_length=1, max_length=150)
    location: str = Field(..., min_length=1, max_length=255)


class BranchResponse(CamelModel):
    branch_id: str
    branch_name: str
    location: str
    created_at: Optional[datetime] = None


class HealthResponse(BaseModel):
    status: str
