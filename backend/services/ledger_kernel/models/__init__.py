"""
Ledger Kernel Models
"""
from .journal import Journal
from .transaction import Transaction

__all__ = [
    "Journal",
    "Transaction",
]
