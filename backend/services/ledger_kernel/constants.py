"""
Ledger Kernel Constants
"""
from enum import Enum


class VoidTag(str, Enum):
    """Bracket tag carried at the start of a voided journal's memo"""
    NONE = ""
    VOID = "[VOID]"
    UNVOID = "[UNVOID]"
    REVOID = "[REVOID]"


# Void memo rotation: VOID and REVOID both rotate to UNVOID
VOID_TAG_TRANSITIONS = {
    VoidTag.NONE: VoidTag.VOID,
    VoidTag.VOID: VoidTag.UNVOID,
    VoidTag.UNVOID: VoidTag.REVOID,
    VoidTag.REVOID: VoidTag.UNVOID,
}


# Structural transaction fields, exactly as written by the entry builder
TRANSACTION_RESERVED_KEYS = frozenset({
    "_id",
    "credit",
    "debit",
    "meta",
    "datetime",
    "account_path",
    "accounts",
    "book",
    "memo",
    "_journal",
    "_journal2",
    "timestamp",
    "voided",
    "void_reason",
    "approved",
    "_original_journal",
})

# Fields never carried from a voided transaction into its reversal's meta.
# "meta" is expanded key by key instead; "approved" and "_journal2" pass
# through and are routed back onto the reversal transaction by the builder.
VOID_RESERVED_KEYS = frozenset({
    "_id",
    "_journal",
    "credit",
    "debit",
    "account_path",
    "accounts",
    "datetime",
    "book",
    "memo",
    "timestamp",
    "voided",
    "void_reason",
    "_original_journal",
})

# Structural keys a caller may set on a single entry line through its meta
LINE_ASSIGNABLE_KEYS = frozenset({
    "_journal2",
    "approved",
    "datetime",
    "timestamp",
})

# Key names that corrupt a plain mapping when copied as attributes
PROTOTYPE_ATTRIBUTES = frozenset({
    "__proto__",
    "constructor",
    "prototype",
})
