"""
Ledger Kernel Services
"""
from .approval import (
    approve_journal,
    cascade_approval,
    unapprove_journal,
)
from .book import Book
from .entry import Entry
from .memo import (
    next_void_tag,
    parse_void_tag,
    resolve_void_reason,
    rotate_void_memo,
)
from .voiding import resume_void, void_journal

__all__ = [
    "Book",
    "Entry",
    "approve_journal",
    "cascade_approval",
    "next_void_tag",
    "parse_void_tag",
    "resolve_void_reason",
    "resume_void",
    "rotate_void_memo",
    "unapprove_journal",
    "void_journal",
]
