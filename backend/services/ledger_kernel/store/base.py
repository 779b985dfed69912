"""
Ledger Repository Contract
==========================

Persistence capability consumed by the entry builder, the voiding engine
and the approval cascade. Journals and transactions are separate documents;
a transaction refers to its journal through ``_journal``.

Every method takes an optional ``options`` session token. When given, the
writes it carries belong to one durability unit if the store supports it;
when absent each write is independently durable.
"""
import asyncio
from abc import ABC, abstractmethod
from typing import Any, AsyncContextManager, Dict, List, Optional
from uuid import UUID

from ..models import Journal, Transaction


class LedgerRepository(ABC):
    """Async document repository for journals and transactions."""

    @abstractmethod
    def session(self) -> AsyncContextManager[Any]:
        """Open a session token grouping the writes made with it."""

    @abstractmethod
    async def get_journal(self, journal_id: UUID, options: Any = None) -> Optional[Journal]:
        ...

    @abstractmethod
    async def find_transactions_by_journal(
        self,
        journal_id: UUID,
        options: Any = None
    ) -> List[Transaction]:
        ...

    @abstractmethod
    async def find_transactions_by_original_journal(
        self,
        journal_id: UUID,
        options: Any = None
    ) -> List[Transaction]:
        """Reversal transactions pointing back at ``journal_id``."""

    @abstractmethod
    async def save_journal(self, journal: Journal, options: Any = None) -> Journal:
        ...

    @abstractmethod
    async def save_transaction(self, transaction: Transaction, options: Any = None) -> Transaction:
        ...

    @abstractmethod
    async def save_transactions(
        self,
        transactions: List[Transaction],
        options: Any = None
    ) -> List[Transaction]:
        ...

    @abstractmethod
    async def mark_journal_voided(
        self,
        journal_id: UUID,
        reason: str,
        options: Any = None
    ) -> bool:
        """
        Set ``voided``/``void_reason`` only if the journal is not voided yet.

        Returns:
            True if this call applied the update, False if the journal was
            already voided (or does not exist).
        """

    @abstractmethod
    async def set_journal_approved(
        self,
        journal_id: UUID,
        approved: bool,
        options: Any = None
    ) -> bool:
        """
        Set ``approved`` only if the stored flag differs, touching no other field.

        Returns:
            True if this call changed the flag, False if it already had that
            value (or the journal does not exist).
        """

    @abstractmethod
    async def patch_transaction(
        self,
        transaction_id: UUID,
        changes: Dict[str, Any],
        options: Any = None
    ) -> bool:
        """
        Merge ``changes`` into one stored transaction, leaving other fields as stored.

        Returns:
            True if the transaction exists and was updated.
        """

    async def patch_each(
        self,
        transaction_ids: List[UUID],
        changes: Dict[str, Any],
        options: Any = None
    ) -> None:
        """
        Patch transactions one by one, concurrently.

        Every write has finished before this returns or raises; the first
        failure is re-raised afterwards.
        """
        results = await asyncio.gather(
            *(self.patch_transaction(tx_id, changes, options) for tx_id in transaction_ids),
            return_exceptions=True
        )
        for result in results:
            if isinstance(result, BaseException):
                raise result
