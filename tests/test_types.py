"""Tests for Member/Array payload checks."""

from __future__ import annotations

import dataclasses

import pytest

from mtojson.types import Array, JsonType, Member


@pytest.mark.parametrize(
    "value, type",
    [
        (True, JsonType.BOOLEAN),
        (-1, JsonType.INTEGER),
        (0, JsonType.UINTEGER),
        ("text", JsonType.STRING),
        ("{}", JsonType.VALUE),
        ([], JsonType.OBJECT),
        ((Member("a", 1, JsonType.INTEGER),), JsonType.OBJECT),
        (Array([], JsonType.STRING), JsonType.ARRAY),
    ],
)
def test_member_accepts_matching_payload(value, type):
    member = Member("key", value, type)
    assert member.value is value


@pytest.mark.parametrize(
    "value, type",
    [
        (1, JsonType.BOOLEAN),
        (True, JsonType.INTEGER),
        (False, JsonType.UINTEGER),
        ("1", JsonType.INTEGER),
        (1.5, JsonType.INTEGER),
        (b"text", JsonType.STRING),
        (None, JsonType.VALUE),
        ("not members", JsonType.OBJECT),
        ([{"key": "a"}], JsonType.OBJECT),
        ([1, 2], JsonType.ARRAY),
    ],
)
def test_member_rejects_mismatched_payload(value, type):
    with pytest.raises(TypeError):
        Member("key", value, type)


def test_negative_uinteger_rejected():
    with pytest.raises(ValueError):
        Member("key", -1, JsonType.UINTEGER)


def test_member_key_must_be_str():
    with pytest.raises(TypeError):
        Member(None, 1, JsonType.INTEGER)


def test_member_type_must_be_json_type():
    with pytest.raises(TypeError):
        Member("key", 1, "integer")


def test_member_is_frozen():
    member = Member("key", 1, JsonType.INTEGER)
    with pytest.raises(dataclasses.FrozenInstanceError):
        member.value = 2


# ---------------------------------------------------------------------------
# Array
# ---------------------------------------------------------------------------


def test_array_count_defaults_to_length():
    assert Array([1, 2, 3], JsonType.INTEGER).count == 3
    assert Array(None, JsonType.INTEGER).count == 0


def test_array_items_limited_by_count():
    arr = Array(["a", "b", "c"], JsonType.STRING, count=2)
    assert list(arr.items()) == ["a", "b"]


def test_empty_array_value_not_inspected():
    arr = Array(None, JsonType.OBJECT, count=0)
    assert list(arr.items()) == []
    arr = Array(["not", "members"], JsonType.OBJECT, count=0)
    assert list(arr.items()) == []


def test_array_only_checks_rendered_elements():
    arr = Array([1, 2, "unused"], JsonType.INTEGER, count=2)
    assert list(arr.items()) == [1, 2]


def test_array_element_mismatch_rejected():
    with pytest.raises(TypeError):
        Array([1, "2"], JsonType.INTEGER)


def test_array_count_exceeding_value_rejected():
    with pytest.raises(ValueError):
        Array([1], JsonType.INTEGER, count=2)


def test_array_negative_count_rejected():
    with pytest.raises(ValueError):
        Array([1], JsonType.INTEGER, count=-1)


def test_array_requires_sequence_when_counted():
    with pytest.raises(TypeError):
        Array(None, JsonType.INTEGER, count=1)
    with pytest.raises(TypeError):
        Array("12", JsonType.STRING)


# ---------------------------------------------------------------------------
# Text payloads
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("type", [JsonType.STRING, JsonType.VALUE])
def test_lone_surrogate_payload_rejected(type):
    with pytest.raises(ValueError):
        Member("key", "\ud800", type)


def test_lone_surrogate_key_rejected():
    with pytest.raises(ValueError):
        Member("\udfff", 1, JsonType.INTEGER)


def test_lone_surrogate_array_element_rejected():
    with pytest.raises(ValueError):
        Array(["ok", "\ud800"], JsonType.STRING)


def test_nul_in_raw_value_rejected():
    with pytest.raises(ValueError):
        Member("key", "1\x002", JsonType.VALUE)


def test_nul_in_string_accepted():
    """Strings are escaped on output, so NUL is allowed there."""
    assert Member("key", "a\x00b", JsonType.STRING).value == "a\x00b"
