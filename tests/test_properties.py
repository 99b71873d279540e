"""Tests for the Properties store: CRUD, subset and typed reads."""

from __future__ import annotations

import io

import pytest

from propconf.properties import EMPTY, Properties
from propconf.types import Encoding, LoadFlags

PROP_ABC = "a.b.c"


@pytest.fixture
def props() -> Properties:
    return Properties()


@pytest.fixture
def typed() -> Properties:
    stream = io.StringIO(
        "bool=true\r\n"
        "bool1=1\n"
        "int=-1\n"
        "uint=42\n"
        "long=-65537\n"
        "ulong=65537\n"
        "bad=1x\n"
        "word=hello world\n"
    )
    return Properties.from_stream(stream)


class TestCrud:
    def test_new_object_is_empty(self, props: Properties) -> None:
        assert len(props) == 0
        assert props.keys() == []

    def test_added_property_can_be_retrieved(self, props: Properties) -> None:
        props.set(PROP_ABC, "true")
        assert props.exists(PROP_ABC)
        assert PROP_ABC in props
        assert props.get(PROP_ABC) == "true"

    def test_get_absent_returns_empty_sentinel(self, props: Properties) -> None:
        assert props.get("missing") == ""
        assert props.get("missing") is EMPTY

    def test_get_absent_with_default(self, props: Properties) -> None:
        assert props.get("missing", "fallback") == "fallback"
        props.set("present", "v")
        assert props.get("present", "fallback") == "v"

    def test_set_overwrites(self, props: Properties) -> None:
        props.set("k", "one")
        props.set("k", "two")
        assert props.get("k") == "two"
        assert len(props) == 1

    def test_remove_property(self, props: Properties) -> None:
        props.set(PROP_ABC, "true")
        assert props.remove(PROP_ABC) is True
        assert not props.exists(PROP_ABC)
        assert props.remove(PROP_ABC) is False

    def test_keys_is_snapshot(self, props: Properties) -> None:
        props.set(PROP_ABC, "true")
        props.set("second", "false")
        names = props.keys()
        assert sorted(names) == [PROP_ABC, "second"]
        props.set("third", "x")
        props.remove("second")
        assert sorted(names) == [PROP_ABC, "second"]

    def test_iteration_allows_mutation(self, props: Properties) -> None:
        props.set("a", "1")
        props.set("b", "2")
        for key in props:
            props.remove(key)
        assert len(props) == 0

    def test_equality_and_to_dict(self, props: Properties) -> None:
        props.set("a", "1")
        other = Properties()
        other.set("a", "1")
        assert props == other
        assert props.to_dict() == {"a": "1"}
        other.set("b", "2")
        assert props != other


class TestSubset:
    def test_subset_strips_prefix(self, props: Properties) -> None:
        props.set("a.b", "x")
        props.set("c", "y")
        sub = props.subset("a.")
        assert sub.to_dict() == {"b": "x"}
        assert "c" not in sub

    def test_subset_is_independent(self, props: Properties) -> None:
        props.set("log.level", "DEBUG")
        sub = props.subset("log.")
        sub.set("level", "INFO")
        assert props.get("log.level") == "DEBUG"

    def test_empty_prefix_copies_everything(self, props: Properties) -> None:
        props.set("a", "1")
        props.set("b", "2")
        assert props.subset("").to_dict() == {"a": "1", "b": "2"}

    def test_exact_prefix_key_becomes_empty_key(self, props: Properties) -> None:
        props.set("a.", "root")
        assert props.subset("a.").to_dict() == {"": "root"}

    def test_subset_keeps_load_flags(self) -> None:
        flags = LoadFlags(encoding=Encoding.UTF16)
        props = Properties(flags)
        assert props.subset("x").flags == flags


class TestTypedReads:
    def test_type_conversions_work(self, typed: Properties) -> None:
        assert typed.get_bool("bool") == (True, True)
        assert typed.get_bool("bool1") == (True, True)
        assert typed.get_int("int") == (-1, True)
        assert typed.get_uint("uint") == (42, True)
        assert typed.get_long("long") == (-65537, True)
        assert typed.get_ulong("ulong") == (65537, True)

    def test_trailing_garbage_fails(self, typed: Properties) -> None:
        assert typed.get_int("bad") == (None, False)
        assert typed.get_long("bad") == (None, False)

    def test_absent_key_fails(self, typed: Properties) -> None:
        assert typed.get_int("nope") == (None, False)
        assert typed.get_bool("nope") == (None, False)
        assert typed.get_string("nope") == (None, False)

    def test_failure_returns_caller_default(self, typed: Properties) -> None:
        assert typed.get_int("bad", default=7) == (7, False)
        assert typed.get_uint("int", default=3) == (3, False)
        assert typed.get_bool("word", default=False) == (False, False)

    def test_get_string_returns_raw_text(self, typed: Properties) -> None:
        assert typed.get_string("word") == ("hello world", True)
        assert typed.get_string("bad") == ("1x", True)

    def test_bool_rejects_non_boolean(self, typed: Properties) -> None:
        assert typed.get_bool("word") == (None, False)
