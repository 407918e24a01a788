"""SQLAlchemy ORM models."""
import uuid
from datetime import datetime, timezone

from sqlalchemy import JSON, CheckConstraint, Column, DateTime, Integer, String

from carddesk.infrastructure.database.base import Base


def generate_uuid() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Employee(Base):
    __tablename__ = "employees"

    employee_id = Column(String(64), primary_key=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    permissions = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)


class Card(Base):
    __tablename__ = "cards"
    __table_args__ = (CheckConstraint("balance_cents >= 0", name="ck_cards_balance_non_negative"),)

    card_number = Column(String(32), primary_key=True)
    holder_name = Column(String(100), nullable=False)
    balance_cents = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)


class Transaction(Base):
    __tablename__ = "transactions"
    __table_args__ = (CheckConstraint("amount_cents > 0", name="ck_transactions_amount_positive"),)

    transaction_id = Column(String(36), primary_key=True, default=generate_uuid)
    # Plain reference, not a foreign key: the log outlives any card row changes.
    card_number = Column(String(32), nullable=False, index=True)
    amount_cents = Column(Integer, nullable=False)
    branch_id = Column(String(64), nullable=False)
    type = Column(String(20), nullable=False)  # withdrawal, deposit
    timestamp = Column(DateTime(timezone=True), nullable=False, default=utcnow)


class Branch(Base):
    __tablename__ = "branches"

    branch_id = Column(String(64), primary_key=True)
    branch_name = Column(String(150), nullable=False)
    location = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
