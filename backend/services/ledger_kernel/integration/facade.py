"""
Ledger Facade
=============

Composition root over an asyncpg pool: one repository per pool, handed to
every Book it creates.
"""
from typing import Any, Dict, Optional
from uuid import UUID

import asyncpg

from ..config import settings
from ..models import Journal
from ..services import Book
from ..store import PostgresLedgerRepository


class LedgerFacade:
    """
    Unified facade for the Ledger Kernel.

    Usage:
        pool = await asyncpg.create_pool(settings.db.url)
        ledger = LedgerFacade(pool)
        await ledger.setup()

        async with ledger.session() as session:
            reversal = await ledger.void_journal("Main", journal_id, options=session)
    """

    def __init__(self, pool: asyncpg.Pool):
        self.pool = pool
        self.repository = PostgresLedgerRepository(pool)
        self._books: Dict[str, Book] = {}

    @classmethod
    async def connect(cls, dsn: str = None) -> "LedgerFacade":
        """Create a pool from settings and a facade over it."""
        pool = await asyncpg.create_pool(
            dsn or settings.db.url,
            min_size=settings.db.min_size,
            max_size=settings.db.max_size,
            command_timeout=settings.db.command_timeout
        )
        return cls(pool)

    async def setup(self) -> None:
        await self.repository.ensure_schema()

    async def close(self) -> None:
        await self.pool.close()

    def session(self):
        return self.repository.session()

    def book(self, name: str) -> Book:
        if name not in self._books:
            self._books[name] = Book(name, self.repository)
        return self._books[name]

    async def void_journal(
        self,
        book_name: str,
        journal_id: UUID,
        reason: Optional[str] = None,
        options: Any = None
    ) -> Journal:
        return await self.book(book_name).void(journal_id, reason, options)

    async def approve_journal(
        self,
        book_name: str,
        journal_id: UUID,
        options: Any = None
    ) -> Journal:
        return await self.book(book_name).approve(journal_id, options)
