"""
Journal Models
"""
from dataclasses import dataclass, field
import datetime as dt
from typing import Optional, List
from uuid import UUID, uuid4

from .transaction import _to_uuid


@dataclass
class Journal:
    """Journal entity: a balanced group of transactions, referenced by id"""
    book: str
    memo: str = ""
    datetime: Optional[dt.datetime] = None
    id: UUID = field(default_factory=uuid4)
    transaction_ids: List[UUID] = field(default_factory=list)

    # Status
    voided: bool = False
    void_reason: Optional[str] = None
    approved: bool = True

    def to_document(self) -> dict:
        doc = {
            "_id": self.id,
            "datetime": self.datetime,
            "memo": self.memo,
            "_transactions": list(self.transaction_ids),
            "book": self.book,
            "voided": self.voided,
            "approved": self.approved,
        }
        if self.void_reason is not None:
            doc["void_reason"] = self.void_reason
        return doc

    @classmethod
    def from_document(cls, doc: dict) -> "Journal":
        return cls(
            id=_to_uuid(doc["_id"]),
            datetime=doc.get("datetime"),
            memo=doc.get("memo") or "",
            transaction_ids=[_to_uuid(tx_id) for tx_id in doc.get("_transactions") or []],
            book=doc.get("book", ""),
            voided=bool(doc.get("voided", False)),
            void_reason=doc.get("void_reason"),
            approved=bool(doc.get("approved", True)),
        )
