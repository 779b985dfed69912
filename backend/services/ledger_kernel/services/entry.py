"""
Entry Builder
=============

Accumulates credit and debit lines and commits them as one balanced
journal. Every line becomes its own transaction document.
"""
import datetime as dt
import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Optional, Sequence, Union
from uuid import UUID

from ..exceptions import UnbalancedEntryError, ValidationError
from ..models import Journal, Transaction
from ..validators import DoubleEntryValidator, parse_account, split_extra

logger = logging.getLogger(__name__)

# Line-assignable stored keys and the Transaction attribute they set
_LINE_FIELD_ATTRIBUTES = {
    "_journal2": "journal2_id",
    "approved": "approved",
    "datetime": "datetime",
    "timestamp": "timestamp",
}


class Entry:
    """
    In-flight journal.

    Usage:
        journal = await (
            book.entry("Received payment")
            .debit("Assets:Cash", 1000)
            .credit("Income:Rent", 1000)
            .commit()
        )
    """

    def __init__(
        self,
        book,
        memo: str,
        datetime: Optional[dt.datetime] = None,
        original_journal_id: Optional[UUID] = None,
        approved: bool = True
    ):
        self.book = book
        self.original_journal_id = original_journal_id
        self.journal = Journal(
            book=book.name,
            memo=memo or "",
            datetime=datetime or dt.datetime.now(dt.timezone.utc),
            approved=approved,
        )
        self.transactions: List[Transaction] = []
        self.validator = DoubleEntryValidator()

    def credit(
        self,
        account: Union[str, Sequence[str]],
        amount,
        extra: Optional[Dict[str, Any]] = None
    ) -> "Entry":
        return self._add_line(account, credit=amount, extra=extra)

    def debit(
        self,
        account: Union[str, Sequence[str]],
        amount,
        extra: Optional[Dict[str, Any]] = None
    ) -> "Entry":
        return self._add_line(account, debit=amount, extra=extra)

    def _add_line(self, account, credit=None, debit=None, extra=None) -> "Entry":
        account_path, accounts = parse_account(account)
        amount = _to_amount(credit if credit is not None else debit)

        structural, meta = split_extra(extra or {})
        transaction = Transaction(
            account_path=account_path,
            accounts=accounts,
            book=self.book.name,
            memo=self.journal.memo,
            meta=meta,
            datetime=self.journal.datetime,
            timestamp=dt.datetime.now(dt.timezone.utc),
            journal_id=self.journal.id,
            original_journal_id=self.original_journal_id,
            approved=self.journal.approved,
        )
        if credit is not None:
            transaction.credit = amount
        else:
            transaction.debit = amount

        for key, value in structural.items():
            if key == "_journal2" and value is not None and not isinstance(value, UUID):
                try:
                    value = UUID(str(value))
                except ValueError:
                    raise ValidationError(f"Invalid journal reference: {value!r}")
            setattr(transaction, _LINE_FIELD_ATTRIBUTES[key], value)

        self.transactions.append(transaction)
        return self

    async def commit(self, options: Any = None) -> Journal:
        """
        Validate and persist the entry.

        Transactions are saved first, then the journal that lists them.

        Raises:
            UnbalancedEntryError: credits and debits differ
            ValidationError: any other double-entry rule is broken
        """
        is_valid, errors = self.validator.validate_lines(self.transactions)
        if not is_valid:
            if not self.validator.is_balanced(self.transactions):
                raise UnbalancedEntryError("Journal is not balanced", errors)
            raise ValidationError("Invalid journal entry", errors)

        self.journal.transaction_ids = [tx.id for tx in self.transactions]

        repository = self.book.repository
        await repository.save_transactions(self.transactions, options)
        await repository.save_journal(self.journal, options)

        total_debit, _, _ = self.validator.calculate_totals(self.transactions)
        logger.info(
            f"Committed journal {self.journal.id} to book {self.book.name}: "
            f"{len(self.transactions)} lines, total={total_debit}"
        )
        return self.journal


def _to_amount(value) -> Decimal:
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValidationError(f"Invalid amount: {value!r}")
    if not amount.is_finite() or amount <= 0:
        raise ValidationError(f"Amount must be positive: {value!r}")
    return amount
