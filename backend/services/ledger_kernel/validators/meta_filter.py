"""
Meta Filter
===========

The only path by which caller-supplied or historical fields reach a
transaction's free-form ``meta`` mapping. Structural field names stay out of
meta, and prototype-polluting key names are dropped outright.
"""
from typing import Any, Dict, Iterable, Mapping, Tuple

from ..constants import (
    LINE_ASSIGNABLE_KEYS,
    PROTOTYPE_ATTRIBUTES,
    TRANSACTION_RESERVED_KEYS,
)


def is_valid_key(key: str, reserved_keys: Iterable[str] = TRANSACTION_RESERVED_KEYS) -> bool:
    """True if ``key`` is not one of the reserved structural field names."""
    return key not in reserved_keys


def is_prototype_attribute(key: str) -> bool:
    return key in PROTOTYPE_ATTRIBUTES


def safe_set_key_to_meta_object(
    key: str,
    value: Any,
    meta: Dict[str, Any],
    reserved_keys: Iterable[str] = TRANSACTION_RESERVED_KEYS
) -> None:
    """Copy ``key`` into ``meta`` unless it is prototype-unsafe or reserved."""
    if is_prototype_attribute(key):
        return
    if is_valid_key(key, reserved_keys):
        meta[key] = value


def build_meta(document: Mapping[str, Any], reserved_keys: Iterable[str]) -> Dict[str, Any]:
    """
    Build a meta mapping from a stored transaction document.

    Top-level fields and the keys nested under the document's own ``meta``
    are flattened into one mapping, each routed through the filter.

    Args:
        document: Stored transaction document
        reserved_keys: Field names to leave out

    Returns:
        New meta mapping
    """
    meta: Dict[str, Any] = {}
    for key, value in document.items():
        if key == "meta":
            for meta_key, meta_value in (value or {}).items():
                safe_set_key_to_meta_object(meta_key, meta_value, meta, reserved_keys)
        else:
            safe_set_key_to_meta_object(key, value, meta, reserved_keys)
    return meta


def split_extra(extra: Mapping[str, Any]) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """
    Split the extra mapping passed to an entry line.

    Returns:
        Tuple of (structural_fields, meta). Structural fields are limited to
        the keys a caller may set on a line; other reserved keys are dropped.
    """
    structural: Dict[str, Any] = {}
    meta: Dict[str, Any] = {}
    for key, value in extra.items():
        if is_prototype_attribute(key):
            continue
        if key in LINE_ASSIGNABLE_KEYS:
            structural[key] = value
        else:
            safe_set_key_to_meta_object(key, value, meta)
    return structural, meta
