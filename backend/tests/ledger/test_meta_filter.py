"""
Meta Filter Tests
=================

Structural field names and prototype-polluting key names must never reach
a transaction's meta mapping.
"""

import pytest

from ledger_kernel.constants import (
    PROTOTYPE_ATTRIBUTES,
    TRANSACTION_RESERVED_KEYS,
    VOID_RESERVED_KEYS,
)
from ledger_kernel.validators import (
    build_meta,
    is_prototype_attribute,
    is_valid_key,
    safe_set_key_to_meta_object,
    split_extra,
)


class TestReservedFieldRegistry:

    def test_transaction_reserved_keys(self):
        assert TRANSACTION_RESERVED_KEYS == {
            "_id", "credit", "debit", "meta", "datetime", "account_path",
            "accounts", "book", "memo", "_journal", "_journal2", "timestamp",
            "voided", "void_reason", "approved", "_original_journal",
        }

    def test_void_variant_excludes_id_and_journal(self):
        assert "_id" in VOID_RESERVED_KEYS
        assert "_journal" in VOID_RESERVED_KEYS
        # Carried through the reversal and re-applied by the entry builder
        assert "approved" not in VOID_RESERVED_KEYS
        assert "_journal2" not in VOID_RESERVED_KEYS


class TestIsValidKey:

    @pytest.mark.parametrize("key", sorted(TRANSACTION_RESERVED_KEYS))
    def test_reserved_keys_are_not_valid(self, key):
        assert not is_valid_key(key)

    def test_custom_key_is_valid(self):
        assert is_valid_key("client")

    def test_reserved_set_is_selectable(self):
        assert is_valid_key("approved", VOID_RESERVED_KEYS)
        assert not is_valid_key("approved", TRANSACTION_RESERVED_KEYS)


class TestPrototypeAttributes:

    @pytest.mark.parametrize("key", ["__proto__", "constructor", "prototype"])
    def test_prototype_names(self, key):
        assert is_prototype_attribute(key)

    def test_ordinary_name(self):
        assert not is_prototype_attribute("proto")


class TestSafeSetKeyToMetaObject:

    def test_copies_custom_key(self):
        meta = {}
        safe_set_key_to_meta_object("client", "Jane", meta)
        assert meta == {"client": "Jane"}

    def test_skips_reserved_key(self):
        meta = {}
        safe_set_key_to_meta_object("credit", 10, meta)
        assert meta == {}

    @pytest.mark.parametrize("key", sorted(PROTOTYPE_ATTRIBUTES))
    def test_skips_prototype_key_even_when_not_reserved(self, key):
        meta = {}
        safe_set_key_to_meta_object(key, {"polluted": True}, meta, reserved_keys=())
        assert meta == {}


class TestBuildMeta:

    def test_flattens_nested_meta_and_filters(self):
        document = {
            "_id": "tx-1",
            "_journal": "j-1",
            "_journal2": "j-2",
            "credit": 10,
            "debit": 0,
            "approved": False,
            "voided": True,
            "meta": {
                "client": "Jane",
                "memo": "smuggled",
                "constructor": "bad",
            },
        }

        meta = build_meta(document, VOID_RESERVED_KEYS)

        assert meta == {
            "_journal2": "j-2",
            "approved": False,
            "client": "Jane",
        }

    def test_missing_meta_is_tolerated(self):
        assert build_meta({"meta": None, "note": "x"}, VOID_RESERVED_KEYS) == {"note": "x"}


class TestSplitExtra:

    def test_routes_assignable_keys_to_structural_fields(self):
        structural, meta = split_extra({
            "_journal2": "j-2",
            "approved": False,
            "client": "Jane",
            "credit": 999,
            "__proto__": {},
        })

        assert structural == {"_journal2": "j-2", "approved": False}
        assert meta == {"client": "Jane"}
