"""
Ledger Kernel
=============

Double-entry bookkeeping over a document store:
- Balanced journals committed through a Book's entry builder
- Voiding by flag-and-reverse (nothing is ever deleted)
- Approval cascading from a journal to its transactions
- Strict separation of structural fields from free-form meta

Usage:
    from ledger_kernel import Book, InMemoryLedgerRepository

    book = Book("Main", InMemoryLedgerRepository())
    journal = await (
        book.entry("Rent")
        .debit("Assets:Cash", 1000)
        .credit("Income:Rent", 1000)
        .commit()
    )
    reversal = await book.void(journal.id)
"""

__version__ = "1.0.0"

# Configuration
from .config import settings, Settings, configure_logging

# Models
from .models import Journal, Transaction

# Constants
from .constants import (
    VoidTag,
    TRANSACTION_RESERVED_KEYS,
    VOID_RESERVED_KEYS,
    PROTOTYPE_ATTRIBUTES,
)

# Errors
from .exceptions import (
    LedgerError,
    ValidationError,
    UnbalancedEntryError,
    InvalidAccountPathError,
    AlreadyVoidedError,
    JournalNotFoundError,
    PersistenceError,
)

# Stores
from .store import (
    LedgerRepository,
    InMemoryLedgerRepository,
    PostgresLedgerRepository,
)

# Services
from .services import (
    Book,
    Entry,
    void_journal,
    resume_void,
    approve_journal,
    cascade_approval,
    unapprove_journal,
    rotate_void_memo,
)

# Validators
from .validators import (
    DoubleEntryValidator,
    is_valid_key,
    is_prototype_attribute,
    safe_set_key_to_meta_object,
)

# Integration
from .integration import LedgerFacade

__all__ = [
    # Version
    "__version__",

    # Configuration
    "settings",
    "Settings",
    "configure_logging",

    # Models
    "Journal",
    "Transaction",

    # Constants
    "VoidTag",
    "TRANSACTION_RESERVED_KEYS",
    "VOID_RESERVED_KEYS",
    "PROTOTYPE_ATTRIBUTES",

    # Errors
    "LedgerError",
    "ValidationError",
    "UnbalancedEntryError",
    "InvalidAccountPathError",
    "AlreadyVoidedError",
    "JournalNotFoundError",
    "PersistenceError",

    # Stores
    "LedgerRepository",
    "InMemoryLedgerRepository",
    "PostgresLedgerRepository",

    # Services
    "Book",
    "Entry",
    "void_journal",
    "resume_void",
    "approve_journal",
    "cascade_approval",
    "unapprove_journal",
    "rotate_void_memo",

    # Validators
    "DoubleEntryValidator",
    "is_valid_key",
    "is_prototype_attribute",
    "safe_set_key_to_meta_object",

    # Integration
    "LedgerFacade",
]
