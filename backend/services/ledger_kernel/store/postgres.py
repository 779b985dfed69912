"""
PostgreSQL Ledger Repository
============================

Document store on top of asyncpg: each journal and transaction is one JSONB
document keyed by its id, with the journal references lifted into indexed
columns for lookups.

Sessions:
- ``session()`` acquires one pooled connection and opens a database
  transaction on it; pass the yielded token as ``options`` to group writes.
- A session's connection serves one query at a time, so concurrent saves
  sharing a session are serialized by the session lock.
"""
import asyncio
import datetime as dt
import json
import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from uuid import UUID

import asyncpg

from ..config import settings
from ..exceptions import PersistenceError
from ..models import Journal, Transaction
from .base import LedgerRepository

logger = logging.getLogger(__name__)

_DATETIME_KEYS = ("datetime", "timestamp")


@dataclass
class PgSession:
    """Session token: a connection inside an open database transaction"""
    conn: asyncpg.Connection
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)


def _encode(doc: dict) -> str:
    return json.dumps(
        doc,
        default=lambda value: value.isoformat() if isinstance(value, dt.datetime) else str(value)
    )


def _decode(raw) -> dict:
    doc = json.loads(raw) if isinstance(raw, str) else dict(raw)
    for key in _DATETIME_KEYS:
        if isinstance(doc.get(key), str):
            doc[key] = dt.datetime.fromisoformat(doc[key])
    return doc


class PostgresLedgerRepository(LedgerRepository):
    """
    Ledger repository backed by an asyncpg pool.

    Args:
        pool: asyncpg connection pool
        journal_table: Journal document table (default from settings)
        transaction_table: Transaction document table (default from settings)
    """

    def __init__(
        self,
        pool: asyncpg.Pool,
        journal_table: str = None,
        transaction_table: str = None
    ):
        self.pool = pool
        self.journal_table = journal_table or settings.ledger.JOURNAL_TABLE
        self.transaction_table = transaction_table or settings.ledger.TRANSACTION_TABLE

    @asynccontextmanager
    async def session(self):
        async with self.pool.acquire() as conn:
            async with conn.transaction():
                yield PgSession(conn)

    @asynccontextmanager
    async def _connection(self, options: Optional[PgSession]):
        """Yield the session's connection, or a pooled one when no session is given."""
        try:
            if isinstance(options, PgSession):
                async with options.lock:
                    yield options.conn
            else:
                async with self.pool.acquire() as conn:
                    yield conn
        except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError) as exc:
            logger.error(f"Ledger store operation failed: {exc}")
            raise PersistenceError(str(exc)) from exc

    async def ensure_schema(self) -> None:
        """Create the document tables and lookup indexes if missing."""
        async with self._connection(None) as conn:
            await conn.execute(
                f"""
                CREATE TABLE IF NOT EXISTS {self.journal_table} (
                    id UUID PRIMARY KEY,
                    book TEXT NOT NULL,
                    doc JSONB NOT NULL
                );
                CREATE TABLE IF NOT EXISTS {self.transaction_table} (
                    id UUID PRIMARY KEY,
                    journal_id UUID,
                    original_journal_id UUID,
                    book TEXT NOT NULL,
                    doc JSONB NOT NULL
                );
                CREATE INDEX IF NOT EXISTS {self.transaction_table}_journal_idx
                    ON {self.transaction_table} (journal_id);
                CREATE INDEX IF NOT EXISTS {self.transaction_table}_original_journal_idx
                    ON {self.transaction_table} (original_journal_id);
                """
            )

    async def get_journal(self, journal_id: UUID, options: Any = None) -> Optional[Journal]:
        async with self._connection(options) as conn:
            raw = await conn.fetchval(
                f"SELECT doc FROM {self.journal_table} WHERE id = $1",
                journal_id
            )
        if raw is None:
            return None
        return Journal.from_document(_decode(raw))

    async def find_transactions_by_journal(
        self,
        journal_id: UUID,
        options: Any = None
    ) -> List[Transaction]:
        async with self._connection(options) as conn:
            rows = await conn.fetch(
                f"SELECT doc FROM {self.transaction_table} WHERE journal_id = $1",
                journal_id
            )
        return [Transaction.from_document(_decode(row["doc"])) for row in rows]

    async def find_transactions_by_original_journal(
        self,
        journal_id: UUID,
        options: Any = None
    ) -> List[Transaction]:
        async with self._connection(options) as conn:
            rows = await conn.fetch(
                f"SELECT doc FROM {self.transaction_table} WHERE original_journal_id = $1",
                journal_id
            )
        return [Transaction.from_document(_decode(row["doc"])) for row in rows]

    async def save_journal(self, journal: Journal, options: Any = None) -> Journal:
        async with self._connection(options) as conn:
            await conn.execute(
                f"""
                INSERT INTO {self.journal_table} (id, book, doc)
                VALUES ($1, $2, $3::jsonb)
                ON CONFLICT (id) DO UPDATE
                SET book = EXCLUDED.book, doc = EXCLUDED.doc
                """,
                journal.id,
                journal.book,
                _encode(journal.to_document())
            )
        return journal

    def _transaction_row(self, transaction: Transaction) -> tuple:
        return (
            transaction.id,
            transaction.journal_id,
            transaction.original_journal_id,
            transaction.book,
            _encode(transaction.to_document()),
        )

    @property
    def _upsert_transaction_sql(self) -> str:
        return f"""
            INSERT INTO {self.transaction_table} (
                id, journal_id, original_journal_id, book, doc
            )
            VALUES ($1, $2, $3, $4, $5::jsonb)
            ON CONFLICT (id) DO UPDATE
            SET journal_id = EXCLUDED.journal_id,
                original_journal_id = EXCLUDED.original_journal_id,
                book = EXCLUDED.book,
                doc = EXCLUDED.doc
            """

    async def save_transaction(self, transaction: Transaction, options: Any = None) -> Transaction:
        async with self._connection(options) as conn:
            await conn.execute(
                self._upsert_transaction_sql,
                *self._transaction_row(transaction)
            )
        return transaction

    async def save_transactions(
        self,
        transactions: List[Transaction],
        options: Any = None
    ) -> List[Transaction]:
        if not transactions:
            return transactions
        async with self._connection(options) as conn:
            await conn.executemany(
                self._upsert_transaction_sql,
                [self._transaction_row(tx) for tx in transactions]
            )
        return transactions

    async def mark_journal_voided(
        self,
        journal_id: UUID,
        reason: str,
        options: Any = None
    ) -> bool:
        async with self._connection(options) as conn:
            updated = await conn.fetchval(
                f"""
                UPDATE {self.journal_table}
                SET doc = doc || jsonb_build_object('voided', true, 'void_reason', $2::text)
                WHERE id = $1
                  AND COALESCE((doc->>'voided')::boolean, false) = false
                RETURNING id
                """,
                journal_id,
                reason
            )
        return updated is not None

    async def set_journal_approved(
        self,
        journal_id: UUID,
        approved: bool,
        options: Any = None
    ) -> bool:
        async with self._connection(options) as conn:
            updated = await conn.fetchval(
                f"""
                UPDATE {self.journal_table}
                SET doc = doc || jsonb_build_object('approved', $2::boolean)
                WHERE id = $1
                  AND COALESCE((doc->>'approved')::boolean, true) <> $2::boolean
                RETURNING id
                """,
                journal_id,
                approved
            )
        return updated is not None

    async def patch_transaction(
        self,
        transaction_id: UUID,
        changes: Dict[str, Any],
        options: Any = None
    ) -> bool:
        async with self._connection(options) as conn:
            updated = await conn.fetchval(
                f"""
                UPDATE {self.transaction_table}
                SET doc = doc || $2::jsonb
                WHERE id = $1
                RETURNING id
                """,
                transaction_id,
                _encode(changes)
            )
        return updated is not None
