"""
Ledger Kernel Errors

Centralized domain errors for the ledger kernel.
"""


class LedgerError(Exception):
    """Base exception for all ledger kernel failures."""


class ValidationError(LedgerError):
    """Raised when an entry or one of its lines is malformed."""

    def __init__(self, message: str, errors=None):
        super().__init__(message)
        self.errors = list(errors or [message])


class UnbalancedEntryError(ValidationError):
    """Raised when an entry's credits do not equal its debits."""


class InvalidAccountPathError(ValidationError):
    """Raised when an account path is empty, has blank segments or is too deep."""


class AlreadyVoidedError(LedgerError):
    """Raised before any write when voiding a journal that is already voided."""

    def __init__(self, journal_id=None):
        self.journal_id = journal_id
        message = "Journal already voided"
        if journal_id is not None:
            message = f"Journal {journal_id} already voided"
        super().__init__(message)


class JournalNotFoundError(LedgerError):
    """Raised when a journal id does not resolve to a stored journal."""

    def __init__(self, journal_id):
        self.journal_id = journal_id
        super().__init__(f"Journal not found: {journal_id}")


class PersistenceError(LedgerError):
    """Raised when the underlying store fails to read or write."""
