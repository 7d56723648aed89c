"""Typed description of a JSON document: members, arrays and value tags."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass


class JsonType(enum.Enum):
    """How a member or array payload is rendered."""

    ARRAY = "array"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    OBJECT = "object"
    STRING = "string"
    UINTEGER = "uinteger"
    VALUE = "value"


def _is_int(value: object) -> bool:
    # bool is an int subclass; a boolean is never accepted as a number
    return isinstance(value, int) and not isinstance(value, bool)


def _check_text(text: str, what: str) -> None:
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise ValueError(f"{what} is not encodable as UTF-8: {text!r}") from exc


def check_payload(value: object, type: JsonType) -> None:
    """Raise TypeError/ValueError unless *value* has the shape *type* implies."""
    if type is JsonType.BOOLEAN:
        if not isinstance(value, bool):
            raise TypeError(f"boolean payload must be bool, got {value!r}")
    elif type is JsonType.INTEGER:
        if not _is_int(value):
            raise TypeError(f"integer payload must be int, got {value!r}")
    elif type is JsonType.UINTEGER:
        if not _is_int(value):
            raise TypeError(f"uinteger payload must be int, got {value!r}")
        if value < 0:
            raise ValueError(f"uinteger payload must not be negative, got {value}")
    elif type in (JsonType.STRING, JsonType.VALUE):
        if not isinstance(value, str):
            raise TypeError(f"{type.value} payload must be str, got {value!r}")
        _check_text(value, f"{type.value} payload")
        # an embedded NUL would terminate the document early
        if type is JsonType.VALUE and "\0" in value:
            raise ValueError(f"value payload must not contain NUL, got {value!r}")
    elif type is JsonType.OBJECT:
        if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
            raise TypeError(f"object payload must be a sequence of Member, got {value!r}")
        for item in value:
            if not isinstance(item, Member):
                raise TypeError(f"object payload must only hold Member, got {item!r}")
    elif type is JsonType.ARRAY:
        if not isinstance(value, Array):
            raise TypeError(f"array payload must be Array, got {value!r}")
    else:
        raise TypeError(f"unknown value type: {type!r}")


@dataclass(frozen=True)
class Member:
    """One ``"key": value`` pair of a JSON object.

    An object body is an ordinary sequence of members. Order is kept and
    duplicate keys are emitted as given.
    """

    key: str
    value: object
    type: JsonType

    def __post_init__(self) -> None:
        if not isinstance(self.key, str):
            raise TypeError(f"member key must be str, got {self.key!r}")
        _check_text(self.key, "member key")
        if not isinstance(self.type, JsonType):
            raise TypeError(f"member type must be JsonType, got {self.type!r}")
        check_payload(self.value, self.type)


@dataclass(frozen=True)
class Array:
    """A homogeneous JSON array: *count* elements of *value*, all of *type*.

    *count* defaults to ``len(value)``. It may be smaller than the backing
    sequence, in which case only the leading elements are rendered. With
    ``count == 0`` the array renders as ``[]`` and *value* may be ``None``.
    """

    value: Sequence | None
    type: JsonType
    count: int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.type, JsonType):
            raise TypeError(f"array type must be JsonType, got {self.type!r}")

        count = self.count
        if count is None:
            count = 0 if self.value is None else len(self.value)
            object.__setattr__(self, "count", count)
        elif not _is_int(count):
            raise TypeError(f"array count must be int, got {count!r}")
        if count < 0:
            raise ValueError(f"array count must not be negative, got {count}")
        if count == 0:
            return

        if self.value is None or isinstance(self.value, (str, bytes)) or not isinstance(
            self.value, Sequence
        ):
            raise TypeError(f"array value must be a sequence, got {self.value!r}")
        if count > len(self.value):
            raise ValueError(
                f"array count {count} exceeds the {len(self.value)} available elements"
            )
        for item in self.value[:count]:
            check_payload(item, self.type)

    def items(self) -> Sequence:
        """The elements that are rendered."""
        if not self.count:
            return ()
        return self.value[: self.count]
