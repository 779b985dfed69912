"""
Ledger Kernel Validators
"""
from .account_path import parse_account
from .double_entry_validator import DoubleEntryValidator
from .meta_filter import (
    build_meta,
    is_prototype_attribute,
    is_valid_key,
    safe_set_key_to_meta_object,
    split_extra,
)

__all__ = [
    "DoubleEntryValidator",
    "build_meta",
    "is_prototype_attribute",
    "is_valid_key",
    "parse_account",
    "safe_set_key_to_meta_object",
    "split_extra",
]
