"""
Voiding Engine
==============

Logically reverses a journal without deleting anything:

1. Resolve the void reason (explicit reason, or the rotated memo)
2. Flag the journal voided through a conditional update
3. Flag each of its transactions voided, saved one by one and concurrently
4. Open a reversal entry linked to the voided journal
5. Add one line per original transaction with its side flipped
6. Commit the reversal, which balances exactly against the original

There is no rollback across these writes. A failure part way leaves the
journal voided with some transactions still live, or everything voided with
no reversal committed; ``resume_void`` finishes either.
"""
import logging
from typing import Any, List, Optional

from ..constants import VOID_RESERVED_KEYS
from ..exceptions import AlreadyVoidedError, ValidationError
from ..models import Journal, Transaction
from ..validators import build_meta
from .memo import resolve_void_reason

logger = logging.getLogger(__name__)


async def void_journal(
    journal: Journal,
    book,
    reason: Optional[str] = None,
    options: Any = None
) -> Journal:
    """
    Void a journal by committing an offsetting reversal.

    Args:
        journal: Journal to void, as loaded from the book's repository
        book: Book whose entry builder commits the reversal
        reason: Void reason; also the reversal memo. When empty the
                journal's memo is rotated instead.
        options: Session token threaded through every write

    Returns:
        The reversal journal

    Raises:
        AlreadyVoidedError: the journal is (or concurrently became) voided;
                            nothing was written
    """
    if journal.voided:
        logger.warning(f"Rejected void of already voided journal {journal.id}")
        raise AlreadyVoidedError(journal.id)

    repository = book.repository
    reason = resolve_void_reason(reason, journal.memo)

    # Only one concurrent caller wins the flag; the rest see it already set
    applied = await repository.mark_journal_voided(journal.id, reason, options)
    if not applied:
        logger.warning(f"Lost void race for journal {journal.id}")
        raise AlreadyVoidedError(journal.id)

    transactions = await repository.find_transactions_by_journal(journal.id, options)
    await _void_transactions(transactions, reason, repository, options)

    reversal = await _commit_reversal(journal, transactions, reason, book, options)
    logger.info(
        f"Voided journal {journal.id} ({len(transactions)} transactions) "
        f"with reversal {reversal.id}: {reason}"
    )
    return reversal


async def resume_void(journal: Journal, book, options: Any = None) -> Journal:
    """
    Finish a void that failed after the journal flag was written.

    Voids the transactions still live and commits the reversal, reusing the
    stored void reason.

    Raises:
        ValidationError: the journal is not voided
        AlreadyVoidedError: a reversal of the journal already exists
    """
    if not journal.voided:
        raise ValidationError(f"Journal {journal.id} is not voided")

    repository = book.repository
    existing = await repository.find_transactions_by_original_journal(journal.id, options)
    if existing:
        raise AlreadyVoidedError(journal.id)

    reason = journal.void_reason or ""
    transactions = await repository.find_transactions_by_journal(journal.id, options)
    await _void_transactions(transactions, reason, repository, options)

    reversal = await _commit_reversal(journal, transactions, reason, book, options)
    logger.info(f"Resumed void of journal {journal.id} with reversal {reversal.id}")
    return reversal


async def _void_transactions(
    transactions: List[Transaction],
    reason: str,
    repository,
    options: Any
) -> None:
    # Written one record at a time; only the void fields are touched
    pending = [tx for tx in transactions if not tx.voided]
    for tx in pending:
        tx.voided = True
        tx.void_reason = reason

    await repository.patch_each(
        [tx.id for tx in pending],
        {"voided": True, "void_reason": reason},
        options
    )


async def _commit_reversal(
    journal: Journal,
    transactions: List[Transaction],
    memo: str,
    book,
    options: Any
) -> Journal:
    entry = book.entry(memo, original_journal_id=journal.id, approved=journal.approved)

    for tx in transactions:
        meta = build_meta(tx.to_document(), VOID_RESERVED_KEYS)
        if tx.credit:
            entry.debit(tx.account_path, tx.credit, meta)
        if tx.debit:
            entry.credit(tx.account_path, tx.debit, meta)

    return await entry.commit(options)
