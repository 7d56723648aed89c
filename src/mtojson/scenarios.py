"""Numbered rendering scenarios run by ``mtojson test``."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from mtojson.types import Array, JsonType, Member


@dataclass(frozen=True)
class Scenario:
    name: str
    expected: str
    build: Callable[[], list[Member]]


def _integer() -> list[Member]:
    return [Member("key", 1, JsonType.INTEGER)]


def _integer_two() -> list[Member]:
    return [
        Member("key", -32767, JsonType.INTEGER),
        Member("key", 32767, JsonType.INTEGER),
    ]


def _string() -> list[Member]:
    return [Member("key", "value", JsonType.STRING)]


def _boolean() -> list[Member]:
    return [Member("key", True, JsonType.BOOLEAN)]


def _valuetype() -> list[Member]:
    return [Member("key", "This is not valid {}JSON!", JsonType.VALUE)]


def _array_integer() -> list[Member]:
    return [Member("array", Array([1, 2], JsonType.INTEGER), JsonType.ARRAY)]


def _array_boolean() -> list[Member]:
    return [Member("array", Array([True, False], JsonType.BOOLEAN), JsonType.ARRAY)]


def _array_string() -> list[Member]:
    # backing storage is larger than the rendered count
    backing = ["1", "23", "", "", "", "", "", ""]
    return [Member("array", Array(backing, JsonType.STRING, count=2), JsonType.ARRAY)]


def _array_array() -> list[Member]:
    inner = Array(["1", "2", "3"], JsonType.STRING)
    return [Member("array", Array([inner, inner], JsonType.ARRAY), JsonType.ARRAY)]


def _array_empty() -> list[Member]:
    return [Member("array", Array(["unused"], JsonType.STRING, count=0), JsonType.ARRAY)]


def _array_one_empty() -> list[Member]:
    empty = Array(None, JsonType.STRING, count=0)
    inner = Array(["1", "2", "3"], JsonType.STRING)
    return [Member("array", Array([empty, inner], JsonType.ARRAY), JsonType.ARRAY)]


def _object() -> list[Member]:
    addresses = Array(["DEADBEEF", "1337BEEF", "0000BEEF"], JsonType.STRING)
    keys = [
        Member("key_id", 1, JsonType.INTEGER),
        Member("count", 3, JsonType.INTEGER),
        Member("values", addresses, JsonType.ARRAY),
    ]
    return [
        Member("keys", keys, JsonType.OBJECT),
        Member("number_of_keys", 1, JsonType.INTEGER),
    ]


def _array_object() -> list[Member]:
    addresses = Array(["DEADBEEF", "1337BEEF", "0000BEEF"], JsonType.STRING)
    feeds = Array(["DEADFEED"], JsonType.STRING)
    keys = Array(
        [
            [
                Member("key_id", 1, JsonType.INTEGER),
                Member("count", 3, JsonType.INTEGER),
                Member("values", addresses, JsonType.ARRAY),
            ],
            [],
            [
                Member("key_id", 2, JsonType.INTEGER),
                Member("count", 1, JsonType.INTEGER),
                Member("values", feeds, JsonType.ARRAY),
            ],
        ],
        JsonType.OBJECT,
    )
    return [
        Member("keys", keys, JsonType.ARRAY),
        Member("number_of_keys", 2, JsonType.INTEGER),
    ]


def _object_empty() -> list[Member]:
    return []


def _object_object() -> list[Member]:
    inner = [Member("inner", True, JsonType.BOOLEAN)]
    middle = [Member("middle", inner, JsonType.OBJECT)]
    return [Member("outer", middle, JsonType.OBJECT)]


def _object_nested_empty() -> list[Member]:
    inner = [Member("inner", [], JsonType.OBJECT)]
    middle = [Member("middle", inner, JsonType.OBJECT)]
    return [Member("outer", middle, JsonType.OBJECT)]


def _uinteger() -> list[Member]:
    return [Member("key", 65535, JsonType.UINTEGER)]


# Numbering is part of the CLI surface (``mtojson test -n N``); do not reorder.
SCENARIOS: dict[int, Scenario] = {
    1: Scenario("test_json_integer", '{"key": 1}', _integer),
    2: Scenario("test_json_integer_two", '{"key": -32767, "key": 32767}', _integer_two),
    3: Scenario("test_json_string", '{"key": "value"}', _string),
    4: Scenario("test_json_boolean", '{"key": true}', _boolean),
    5: Scenario("test_json_valuetype", '{"key": This is not valid {}JSON!}', _valuetype),
    6: Scenario("test_json_array_integer", '{"array": [1, 2]}', _array_integer),
    7: Scenario("test_json_array_boolean", '{"array": [true, false]}', _array_boolean),
    8: Scenario("test_json_array_string", '{"array": ["1", "23"]}', _array_string),
    9: Scenario(
        "test_json_array_array",
        '{"array": [["1", "2", "3"], ["1", "2", "3"]]}',
        _array_array,
    ),
    10: Scenario("test_json_array_empty", '{"array": []}', _array_empty),
    11: Scenario(
        "test_json_array_one_empty",
        '{"array": [[], ["1", "2", "3"]]}',
        _array_one_empty,
    ),
    12: Scenario(
        "test_json_object",
        '{"keys": {"key_id": 1, "count": 3, '
        '"values": ["DEADBEEF", "1337BEEF", "0000BEEF"]}, '
        '"number_of_keys": 1}',
        _object,
    ),
    13: Scenario(
        "test_json_array_object",
        '{"keys": [{"key_id": 1, "count": 3, '
        '"values": ["DEADBEEF", "1337BEEF", "0000BEEF"]}, {}, '
        '{"key_id": 2, "count": 1, "values": ["DEADFEED"]}], '
        '"number_of_keys": 2}',
        _array_object,
    ),
    14: Scenario("test_json_object_empty", "{}", _object_empty),
    15: Scenario(
        "test_json_object_object",
        '{"outer": {"middle": {"inner": true}}}',
        _object_object,
    ),
    16: Scenario(
        "test_json_object_nested_empty",
        '{"outer": {"middle": {"inner": {}}}}',
        _object_nested_empty,
    ),
    17: Scenario("test_json_uinteger", '{"key": 65535}', _uinteger),
}
