"""
Fixtures for Ledger Kernel Tests
================================

Provides pytest fixtures for:
- In-memory repositories (plain and write-recording)
- Books over those repositories
- Committed test journals
"""

import asyncio
import pytest
import pytest_asyncio
from decimal import Decimal

from ledger_kernel.exceptions import PersistenceError
from ledger_kernel.services import Book
from ledger_kernel.store import InMemoryLedgerRepository

TEST_BOOK = "MyBook"


class RecordingRepository(InMemoryLedgerRepository):
    """In-memory repository that logs every write and the options it carried."""

    def __init__(self):
        super().__init__()
        self.writes = []
        self.options_seen = []

    def _record(self, kind, record_id, options):
        self.writes.append((kind, record_id))
        self.options_seen.append(options)

    async def save_journal(self, journal, options=None):
        self._record("journal", journal.id, options)
        return await super().save_journal(journal, options)

    async def save_transaction(self, transaction, options=None):
        self._record("transaction", transaction.id, options)
        return await super().save_transaction(transaction, options)

    async def patch_transaction(self, transaction_id, changes, options=None):
        # Yield so concurrent writes actually interleave
        await asyncio.sleep(0)
        self._record("transaction", transaction_id, options)
        return await super().patch_transaction(transaction_id, changes, options)

    async def save_transactions(self, transactions, options=None):
        self._record("transactions", tuple(tx.id for tx in transactions), options)
        return await super().save_transactions(transactions, options)

    async def mark_journal_voided(self, journal_id, reason, options=None):
        self._record("void_flag", journal_id, options)
        return await super().mark_journal_voided(journal_id, reason, options)

    async def set_journal_approved(self, journal_id, approved, options=None):
        self._record("approve_flag", journal_id, options)
        return await super().set_journal_approved(journal_id, approved, options)

    def kinds(self):
        return [kind for kind, _ in self.writes]


class FailingRepository(RecordingRepository):
    """
    Fails the n-th individual transaction write (1-based) immediately.

    The other writes are held back by ``delay`` seconds first, so they are
    still in flight when the failing write returns.
    """

    def __init__(self, fail_on: int, delay: float = 0):
        super().__init__()
        self.fail_on = fail_on
        self.delay = delay
        self.enabled = False
        self._calls = 0

    async def patch_transaction(self, transaction_id, changes, options=None):
        if self.enabled:
            self._calls += 1
            if self._calls == self.fail_on:
                raise PersistenceError("connection reset")
            await asyncio.sleep(self.delay)
        return await super().patch_transaction(transaction_id, changes, options)


@pytest.fixture
def repository():
    """Get a write-recording in-memory repository."""
    return RecordingRepository()


@pytest.fixture
def book(repository):
    """Get a Book over the recording repository."""
    return Book(TEST_BOOK, repository)


@pytest_asyncio.fixture
async def rent_journal(book):
    """A committed two-sided journal: 500 cash in, 500 rent income."""
    return await create_test_journal(book, memo="Rent", amount=Decimal("500"))


# Helper functions for tests
async def create_test_journal(
    book,
    memo: str = "Test journal entry",
    amount: Decimal = Decimal("100"),
    meta: dict = None,
    approved: bool = True
):
    """
    Commit a test journal with one credit and one debit line.
    Returns the committed Journal.
    """
    return await (
        book.entry(memo, approved=approved)
        .credit("Income:Rent", amount, meta)
        .debit("Assets:Cash", amount, meta)
        .commit()
    )


def totals(transactions):
    """Return (total_credit, total_debit) of a list of transactions."""
    credit = sum((tx.credit for tx in transactions), Decimal("0"))
    debit = sum((tx.debit for tx in transactions), Decimal("0"))
    return credit, debit
