"""Withdrawal processor exports."""

from .service import MovementResult, WithdrawalService

__all__ = ["MovementResult", "WithdrawalService"]
