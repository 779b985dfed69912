"""
Void memo rotation.

A journal voided without an explicit reason gets a memo derived from its
own, by rotating the bracket tag at the start of the memo:

    "Rent"          -> "[VOID] Rent"
    "[VOID] Rent"   -> "[UNVOID] Rent"
    "[UNVOID] Rent" -> "[REVOID] Rent"
    "[REVOID] Rent" -> "[UNVOID] Rent"
"""
from typing import Optional, Tuple

from ..constants import VOID_TAG_TRANSITIONS, VoidTag

_TAGGED = (VoidTag.VOID, VoidTag.UNVOID, VoidTag.REVOID)


def parse_void_tag(memo: str) -> Tuple[VoidTag, str]:
    """Split a memo into its leading tag and the remainder (kept verbatim)."""
    memo = memo or ""
    for tag in _TAGGED:
        if memo.startswith(tag.value):
            return tag, memo[len(tag.value):]
    return VoidTag.NONE, memo


def next_void_tag(tag: VoidTag) -> VoidTag:
    return VOID_TAG_TRANSITIONS[tag]


def rotate_void_memo(memo: str) -> str:
    tag, rest = parse_void_tag(memo)
    if tag is VoidTag.NONE:
        return f"{VoidTag.VOID.value} {rest}"
    return f"{next_void_tag(tag).value}{rest}"


def resolve_void_reason(reason: Optional[str], memo: str) -> str:
    """An explicit reason is used verbatim; otherwise the memo is rotated."""
    if reason:
        return reason
    return rotate_void_memo(memo)
