"""Shared pytest fixtures for mtojson tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest


@pytest.fixture()
def member_list() -> dict:
    """A fully valid MemberList dict covering every value type."""
    return {
        "members": [
            {"key": "name", "type": "string", "value": "sensor-1"},
            {"key": "enabled", "type": "boolean", "value": True},
            {"key": "offset", "type": "integer", "value": -12},
            {"key": "uptime", "type": "uinteger", "value": 65535},
            {"key": "raw", "type": "value", "value": "null"},
            {
                "key": "readings",
                "type": "array",
                "value": {"type": "integer", "items": [1, 2, 3]},
            },
            {
                "key": "meta",
                "type": "object",
                "value": [{"key": "unit", "type": "string", "value": "C"}],
            },
        ]
    }


@pytest.fixture()
def member_list_document() -> str:
    """The exact rendering of member_list."""
    return (
        '{"name": "sensor-1", "enabled": true, "offset": -12, "uptime": 65535, '
        '"raw": null, "readings": [1, 2, 3], "meta": {"unit": "C"}}'
    )


@pytest.fixture()
def member_file(tmp_path: Path):
    """Factory fixture: write a dict to a uniquely-named temp JSON file, return the Path."""
    counter = {"n": 0}

    def _make(data: dict) -> Path:
        counter["n"] += 1
        p = tmp_path / f"members_{counter['n']}.json"
        p.write_text(json.dumps(data), encoding="utf-8")
        return p

    return _make
