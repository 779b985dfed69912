"""
Ledger Facade Tests
===================
"""

import os
import pytest
from uuid import uuid4

from ledger_kernel.integration import LedgerFacade
from ledger_kernel.store import PostgresLedgerRepository


class TestLedgerFacade:

    def test_books_share_one_repository(self):
        facade = LedgerFacade(pool=object())

        main = facade.book("Main")

        assert isinstance(facade.repository, PostgresLedgerRepository)
        assert main.repository is facade.repository
        assert facade.book("Main") is main
        assert facade.book("Other") is not main

    @pytest.mark.asyncio
    @pytest.mark.skipif(
        not os.environ.get("TEST_DATABASE_URL"),
        reason="TEST_DATABASE_URL not set"
    )
    async def test_void_and_approve_round_trip(self, monkeypatch):
        suffix = uuid4().hex[:8]
        monkeypatch.setattr(
            "ledger_kernel.config.settings.ledger.JOURNAL_TABLE", f"facade_journals_{suffix}"
        )
        monkeypatch.setattr(
            "ledger_kernel.config.settings.ledger.TRANSACTION_TABLE", f"facade_transactions_{suffix}"
        )
        facade = await LedgerFacade.connect(os.environ["TEST_DATABASE_URL"])
        try:
            await facade.setup()
            journal = await (
                facade.book("Main").entry("Rent", approved=False)
                .debit("Assets:Cash", 10)
                .credit("Income:Rent", 10)
                .commit()
            )

            await facade.approve_journal("Main", journal.id)
            async with facade.session() as session:
                reversal = await facade.void_journal("Main", journal.id, "Typo", options=session)

            assert reversal.memo == "Typo"
            transactions = await facade.repository.find_transactions_by_journal(journal.id)
            assert all(tx.approved and tx.voided for tx in transactions)
        finally:
            async with facade.pool.acquire() as conn:
                await conn.execute(f"DROP TABLE IF EXISTS {facade.repository.journal_table}")
                await conn.execute(f"DROP TABLE IF EXISTS {facade.repository.transaction_table}")
            await facade.close()
