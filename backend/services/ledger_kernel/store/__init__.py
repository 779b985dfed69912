"""
Ledger Kernel Stores
"""
from .base import LedgerRepository
from .memory import InMemoryLedgerRepository
from .postgres import PgSession, PostgresLedgerRepository

__all__ = [
    "LedgerRepository",
    "InMemoryLedgerRepository",
    "PgSession",
    "PostgresLedgerRepository",
]
