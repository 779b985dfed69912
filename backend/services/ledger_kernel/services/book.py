"""
Book
====

A named ledger partition. Owns no state beyond its name and the
repository it writes through.
"""
import datetime as dt
from typing import Any, Optional
from uuid import UUID

from ..exceptions import JournalNotFoundError
from ..models import Journal
from ..store import LedgerRepository
from .approval import approve_journal, unapprove_journal
from .entry import Entry
from .voiding import void_journal


class Book:

    def __init__(self, name: str, repository: LedgerRepository):
        self.name = name
        self.repository = repository

    def entry(
        self,
        memo: str,
        datetime: Optional[dt.datetime] = None,
        original_journal_id: Optional[UUID] = None,
        approved: bool = True
    ) -> Entry:
        return Entry(
            self,
            memo,
            datetime=datetime,
            original_journal_id=original_journal_id,
            approved=approved
        )

    async def get_journal(self, journal_id: UUID, options: Any = None) -> Journal:
        journal = await self.repository.get_journal(journal_id, options)
        if journal is None or journal.book != self.name:
            raise JournalNotFoundError(journal_id)
        return journal

    async def void(
        self,
        journal_id: UUID,
        reason: Optional[str] = None,
        options: Any = None
    ) -> Journal:
        """Void a journal of this book; returns the reversal journal."""
        journal = await self.get_journal(journal_id, options)
        return await void_journal(journal, self, reason, options)

    async def approve(self, journal_id: UUID, options: Any = None) -> Journal:
        journal = await self.get_journal(journal_id, options)
        return await approve_journal(journal, self.repository, options)

    async def set_approved(self, journal_id: UUID, approved: bool, options: Any = None) -> Journal:
        """Set the journal's approval flag; only the false -> true edge cascades."""
        journal = await self.get_journal(journal_id, options)
        if approved:
            return await approve_journal(journal, self.repository, options)
        return await unapprove_journal(journal, self.repository, options)
