"""Loading and validation of MemberList description files."""

from __future__ import annotations

import json
from pathlib import Path

import jsonschema

from mtojson.types import Array, JsonType, Member

_MEMBER_LIST_SCHEMA_PATH = Path(__file__).resolve().parent / "schemas" / "MemberList.v1.json"


class ValidationError(Exception):
    """Raised when a MemberList description is unreadable or violates the contract."""


def _build_members(items: list) -> list[Member]:
    members = []
    for item in items:
        value_type = JsonType(item["type"])
        members.append(Member(item["key"], _build_value(item["value"], value_type), value_type))
    return members


def _build_array(desc: dict) -> Array:
    element_type = JsonType(desc["type"])
    return Array([_build_value(v, element_type) for v in desc["items"]], element_type)


def _build_value(value, type: JsonType):
    if type is JsonType.OBJECT:
        return _build_members(value)
    if type is JsonType.ARRAY:
        return _build_array(value)
    return value


def validate_members_dict(data: dict) -> list[Member]:
    """Validate an in-memory MemberList dict and build the member tree.

    Schema-level validation (MemberList.v1.json) runs first; payload shape
    checks of Member/Array catch anything the schema lets through.

    Raises ValidationError on any problem.
    """
    schema = json.loads(_MEMBER_LIST_SCHEMA_PATH.read_text(encoding="utf-8"))
    try:
        jsonschema.validate(data, schema)
    except jsonschema.ValidationError as exc:
        raise ValidationError(f"MemberList violates contract schema: {exc.message}") from exc

    try:
        return _build_members(data["members"])
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"MemberList payload mismatch: {exc}") from exc


def load_members(path: str) -> list[Member]:
    """Read a MemberList JSON file, then validate it via validate_members_dict."""
    try:
        raw = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ValidationError(f"Cannot read file: {exc}") from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValidationError(f"Invalid JSON: {exc}") from exc

    return validate_members_dict(data)
