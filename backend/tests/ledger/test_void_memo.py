"""
Void Memo Rotation Tests
========================
"""

import pytest

from ledger_kernel.constants import VoidTag
from ledger_kernel.services.memo import (
    next_void_tag,
    parse_void_tag,
    resolve_void_reason,
    rotate_void_memo,
)


class TestVoidTagTransitions:

    @pytest.mark.parametrize("tag, expected", [
        (VoidTag.NONE, VoidTag.VOID),
        (VoidTag.VOID, VoidTag.UNVOID),
        (VoidTag.UNVOID, VoidTag.REVOID),
        (VoidTag.REVOID, VoidTag.UNVOID),
    ])
    def test_transition_table(self, tag, expected):
        assert next_void_tag(tag) == expected


class TestParseVoidTag:

    def test_untagged(self):
        assert parse_void_tag("Rent") == (VoidTag.NONE, "Rent")

    def test_tagged(self):
        assert parse_void_tag("[UNVOID] Rent") == (VoidTag.UNVOID, " Rent")

    def test_tag_must_lead(self):
        assert parse_void_tag("Rent [VOID]") == (VoidTag.NONE, "Rent [VOID]")

    def test_empty_memo(self):
        assert parse_void_tag(None) == (VoidTag.NONE, "")


class TestRotateVoidMemo:

    @pytest.mark.parametrize("memo, expected", [
        ("Rent", "[VOID] Rent"),
        ("[VOID] Rent", "[UNVOID] Rent"),
        ("[UNVOID] Rent", "[REVOID] Rent"),
        ("[REVOID] Rent", "[UNVOID] Rent"),
    ])
    def test_rotation(self, memo, expected):
        assert rotate_void_memo(memo) == expected

    def test_only_leading_tag_is_replaced(self):
        assert rotate_void_memo("[VOID] Rent [VOID]") == "[UNVOID] Rent [VOID]"


class TestResolveVoidReason:

    def test_explicit_reason_wins(self):
        assert resolve_void_reason("Duplicate", "[VOID] Rent") == "Duplicate"

    @pytest.mark.parametrize("reason", [None, ""])
    def test_missing_reason_rotates_memo(self, reason):
        assert resolve_void_reason(reason, "Rent") == "[VOID] Rent"
