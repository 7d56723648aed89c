"""Rendered document output writer."""

from __future__ import annotations

from pathlib import Path


def write_document(document: bytes, path: str) -> None:
    """Write a rendered *document* to *path* as a POSIX text file.

    The bytes are written unchanged, followed by a single trailing ``\\n``.
    Parent directories are created as needed.
    """
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_bytes(document + b"\n")
