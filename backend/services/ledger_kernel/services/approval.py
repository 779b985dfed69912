"""
Approval Cascade
================

When a journal's ``approved`` flag goes from false to true, every
transaction of the journal is approved too.

The flag is flipped through the store's conditional update, so exactly one
caller observes the edge and runs the cascade, and no other journal field
(``voided`` in particular) is rewritten from a stale copy. Flag and cascade
share one session: on a transactional store the flag only becomes durable
together with the transaction approvals.
"""
import logging
from typing import Any

from ..models import Journal
from ..store import LedgerRepository

logger = logging.getLogger(__name__)


async def cascade_approval(
    journal: Journal,
    repository: LedgerRepository,
    options: Any = None
) -> int:
    """Approve the journal's transactions; returns how many were written."""
    transactions = await repository.find_transactions_by_journal(journal.id, options)
    pending = [tx for tx in transactions if not tx.approved]
    for tx in pending:
        tx.approved = True

    await repository.patch_each([tx.id for tx in pending], {"approved": True}, options)

    logger.info(f"Approved {len(pending)} transactions of journal {journal.id}")
    return len(pending)


async def approve_journal(
    journal: Journal,
    repository: LedgerRepository,
    options: Any = None
) -> Journal:
    """Approve a journal, cascading only when this call made the false -> true change."""
    if options is None:
        async with repository.session() as session:
            return await approve_journal(journal, repository, session)

    if await repository.set_journal_approved(journal.id, True, options):
        await cascade_approval(journal, repository, options)
    else:
        logger.debug(f"Journal {journal.id} already approved, nothing to cascade")
    return await repository.get_journal(journal.id, options)


async def unapprove_journal(
    journal: Journal,
    repository: LedgerRepository,
    options: Any = None
) -> Journal:
    """Clear a journal's approval flag. Its transactions are left as they are."""
    await repository.set_journal_approved(journal.id, False, options)
    return await repository.get_journal(journal.id, options)
