"""Plain text parsing into a line-indexed Document."""

from __future__ import annotations

import os
from pathlib import Path

from .core import Document, Utf8Error

CHUNK_SIZE = 64 * 1024 * 1024


def line_offsets(data: bytes) -> list[tuple[int, int]]:
    """Index every line as (offset, length), dropping '\\n' and a preceding '\\r'.

    The data is scanned in fixed-size chunks; a final unterminated piece of
    each chunk counts as a line of its own.
    """
    offsets: list[tuple[int, int]] = []
    size = len(data)
    for base in range(0, size, CHUNK_SIZE):
        chunk_end = min(base + CHUNK_SIZE, size)
        prev = base
        while (nl := data.find(b"\n", prev, chunk_end)) != -1:
            line_end = nl - 1 if nl > base and data[nl - 1] == 0x0D else nl
            offsets.append((prev, line_end - prev))
            prev = nl + 1
        if prev < chunk_end:
            offsets.append((prev, chunk_end - prev))
    return offsets


def _check_utf8(data: bytes, offsets: list[tuple[int, int]]) -> None:
    for start, length in offsets:
        try:
            bytes(data[start:start + length]).decode("utf-8")
        except UnicodeDecodeError as err:
            raise Utf8Error(err) from err


def parse_txt(path: str | os.PathLike[str]) -> Document:
    """Read a text file, index its lines and check that each is valid UTF-8."""
    data = Path(path).read_bytes()
    offsets = line_offsets(data)
    _check_utf8(data, offsets)
    return Document(data, offsets)