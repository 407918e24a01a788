"""Branch back-office service for cards, withdrawals and the transaction log."""

__version__ = "0.1.0"
