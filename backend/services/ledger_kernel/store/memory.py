"""
In-memory ledger repository.

Keeps deep copies of documents so callers never share state with the store.
Useful for embedding and for tests.
"""
import copy
from contextlib import asynccontextmanager
from typing import Any, Dict, List, Optional
from uuid import UUID

from ..models import Journal, Transaction
from .base import LedgerRepository


class InMemoryLedgerRepository(LedgerRepository):

    def __init__(self):
        self.journals: Dict[UUID, dict] = {}
        self.transactions: Dict[UUID, dict] = {}

    @asynccontextmanager
    async def session(self):
        # No durability unit to open; the token is informational only
        yield {}

    async def get_journal(self, journal_id: UUID, options: Any = None) -> Optional[Journal]:
        doc = self.journals.get(journal_id)
        if doc is None:
            return None
        return Journal.from_document(copy.deepcopy(doc))

    async def find_transactions_by_journal(
        self,
        journal_id: UUID,
        options: Any = None
    ) -> List[Transaction]:
        return [
            Transaction.from_document(copy.deepcopy(doc))
            for doc in self.transactions.values()
            if doc.get("_journal") == journal_id
        ]

    async def find_transactions_by_original_journal(
        self,
        journal_id: UUID,
        options: Any = None
    ) -> List[Transaction]:
        return [
            Transaction.from_document(copy.deepcopy(doc))
            for doc in self.transactions.values()
            if doc.get("_original_journal") == journal_id
        ]

    async def save_journal(self, journal: Journal, options: Any = None) -> Journal:
        self.journals[journal.id] = copy.deepcopy(journal.to_document())
        return journal

    async def save_transaction(self, transaction: Transaction, options: Any = None) -> Transaction:
        self.transactions[transaction.id] = copy.deepcopy(transaction.to_document())
        return transaction

    async def save_transactions(
        self,
        transactions: List[Transaction],
        options: Any = None
    ) -> List[Transaction]:
        for transaction in transactions:
            self.transactions[transaction.id] = copy.deepcopy(transaction.to_document())
        return transactions

    async def mark_journal_voided(
        self,
        journal_id: UUID,
        reason: str,
        options: Any = None
    ) -> bool:
        # Check and set run without yielding to the event loop
        doc = self.journals.get(journal_id)
        if doc is None or doc.get("voided"):
            return False
        doc["voided"] = True
        doc["void_reason"] = reason
        return True

    async def set_journal_approved(
        self,
        journal_id: UUID,
        approved: bool,
        options: Any = None
    ) -> bool:
        doc = self.journals.get(journal_id)
        if doc is None or doc.get("approved", True) == approved:
            return False
        doc["approved"] = approved
        return True

    async def patch_transaction(
        self,
        transaction_id: UUID,
        changes: Dict[str, Any],
        options: Any = None
    ) -> bool:
        doc = self.transactions.get(transaction_id)
        if doc is None:
            return False
        doc.update(copy.deepcopy(changes))
        return True

    def snapshot(self) -> dict:
        """Deep copy of every stored document."""
        return {
            "journals": copy.deepcopy(self.journals),
            "transactions": copy.deepcopy(self.transactions),
        }
