"""
Transaction Models
"""
from dataclasses import dataclass, field
import datetime as dt
from decimal import Decimal
from typing import Optional, List, Dict, Any
from uuid import UUID, uuid4


def _to_decimal(value: Any) -> Decimal:
    if value is None:
        return Decimal("0")
    return Decimal(str(value))


def _to_uuid(value: Any) -> Optional[UUID]:
    if value is None or isinstance(value, UUID):
        return value
    return UUID(str(value))


@dataclass
class Transaction:
    """One credit or debit line of a journal"""
    account_path: List[str]
    accounts: str
    book: str
    credit: Decimal = Decimal("0")
    debit: Decimal = Decimal("0")
    memo: str = ""
    meta: Dict[str, Any] = field(default_factory=dict)
    datetime: Optional[dt.datetime] = None
    timestamp: Optional[dt.datetime] = None
    id: UUID = field(default_factory=uuid4)

    # Journal references
    journal_id: Optional[UUID] = None
    journal2_id: Optional[UUID] = None
    original_journal_id: Optional[UUID] = None  # Only set on reversal lines

    # Status
    voided: bool = False
    void_reason: Optional[str] = None
    approved: bool = True

    @property
    def is_credit(self) -> bool:
        return self.credit > 0

    @property
    def is_debit(self) -> bool:
        return self.debit > 0

    @property
    def amount(self) -> Decimal:
        return self.credit if self.is_credit else self.debit

    def to_document(self) -> dict:
        """Stored representation, keyed by the reserved field names."""
        doc = {
            "_id": self.id,
            "credit": self.credit,
            "debit": self.debit,
            "meta": dict(self.meta),
            "datetime": self.datetime,
            "account_path": list(self.account_path),
            "accounts": self.accounts,
            "book": self.book,
            "memo": self.memo,
            "_journal": self.journal_id,
            "timestamp": self.timestamp,
            "voided": self.voided,
            "approved": self.approved,
        }
        # Optional fields are only stored once set
        if self.journal2_id is not None:
            doc["_journal2"] = self.journal2_id
        if self.void_reason is not None:
            doc["void_reason"] = self.void_reason
        if self.original_journal_id is not None:
            doc["_original_journal"] = self.original_journal_id
        return doc

    @classmethod
    def from_document(cls, doc: dict) -> "Transaction":
        return cls(
            id=_to_uuid(doc["_id"]),
            credit=_to_decimal(doc.get("credit")),
            debit=_to_decimal(doc.get("debit")),
            meta=dict(doc.get("meta") or {}),
            datetime=doc.get("datetime"),
            account_path=list(doc.get("account_path") or []),
            accounts=doc.get("accounts", ""),
            book=doc.get("book", ""),
            memo=doc.get("memo", ""),
            journal_id=_to_uuid(doc.get("_journal")),
            journal2_id=_to_uuid(doc.get("_journal2")),
            timestamp=doc.get("timestamp"),
            voided=bool(doc.get("voided", False)),
            void_reason=doc.get("void_reason"),
            approved=bool(doc.get("approved", True)),
            original_journal_id=_to_uuid(doc.get("_original_journal")),
        )
