"""CSV and TSV parsing into a line-indexed Document."""

from __future__ import annotations

import os
from pathlib import Path

from .core import Document, Utf8Error

CHUNK_SIZE = 64 * 1024 * 1024
_SAMPLE_SIZE = 4096


def detect_separator(data: bytes) -> bytes:
    """Guess the field separator from the first 4096 bytes: tab or comma."""
    sample = bytes(data[:_SAMPLE_SIZE])
    return b"\t" if sample.count(b"\t") > sample.count(b",") else b","


def compute_offsets(data: bytes, stride: int) -> list[tuple[int, int]]:
    """Index one line in every `stride` as (offset, length).

    Line terminators ('\\n', and a '\\r' before it) are excluded. The data is
    scanned in fixed-size chunks and the stride count restarts in each chunk.
    """
    if stride < 1:
        raise ValueError("stride must be at least 1")
    offsets: list[tuple[int, int]] = []
    size = len(data)
    for base in range(0, size, CHUNK_SIZE):
        chunk_end = min(base + CHUNK_SIZE, size)
        prev = base
        count = 0
        while (nl := data.find(b"\n", prev, chunk_end)) != -1:
            if count % stride == 0:
                line_end = nl - 1 if nl > base and data[nl - 1] == 0x0D else nl
                offsets.append((prev, line_end - prev))
            prev = nl + 1
            count += 1
        if prev < chunk_end and count % stride == 0:
            offsets.append((prev, chunk_end - prev))
    return offsets


def _validate(data: bytes, offsets: list[tuple[int, int]]) -> None:
    for start, length in offsets:
        try:
            bytes(data[start:start + length]).decode("utf-8")
        except UnicodeDecodeError as err:
            raise Utf8Error(err) from err


def parse_csv(path: str | os.PathLike[str], validate_utf8: bool = False) -> Document:
    """Read a CSV/TSV file and index all of its lines.

    Every indexed line is checked for valid UTF-8 whatever `validate_utf8` says.
    """
    return parse_with_partial_index(path, 1, validate_utf8)


def parse_buffer(data: bytes, validate_utf8: bool = False) -> Document:
    """Index the lines of an in-memory buffer, keeping a copy of it."""
    copy = bytes(data)
    offsets = compute_offsets(copy, 1)
    _validate(copy, offsets)
    return Document(copy, offsets)


def parse_with_partial_index(
    path: str | os.PathLike[str], stride: int, validate_utf8: bool = False
) -> Document:
    """Read a CSV/TSV file, indexing only one line in every `stride`."""
    data = Path(path).read_bytes()
    offsets = compute_offsets(data, stride)
    _validate(data, offsets)
    return Document(data, offsets)