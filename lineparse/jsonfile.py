"""JSON and JSON Lines parsing into Python values or a line-indexed Document."""

from __future__ import annotations

import json
import os
import re
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from .core import Document, FormatError, Utf8Error

AUTO_THRESHOLD = 512 * 1024 * 1024
"""Files smaller than this many bytes are loaded whole by parse_auto."""

_ITER_PROBE = 16
_DETECT_PROBE = 32
_WHITESPACE = re.compile(r"[ \t\n\r]*")

PathLike = "str | os.PathLike[str]"


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid number {name!r}")


_DECODER = json.JSONDecoder(parse_constant=_reject_constant)


def _loads(text: str) -> Any:
    try:
        return _DECODER.decode(text)
    except (ValueError, RecursionError) as err:
        raise FormatError(str(err)) from err


def _dumps(value: Any) -> str:
    try:
        return json.dumps(
            value,
            separators=(",", ":"),
            sort_keys=True,
            ensure_ascii=False,
            allow_nan=False,
        )
    except (ValueError, TypeError, RecursionError) as err:
        raise FormatError(str(err)) from err


def _split_lines(text: str) -> list[str]:
    """Split on '\\n', dropping a '\\r' before it and a trailing empty piece."""
    if not text:
        return []
    parts = text.split("\n")
    last = parts.pop()
    lines = [part.removesuffix("\r") for part in parts]
    if last:
        lines.append(last)
    return lines


def _read_text(path: str | os.PathLike[str]) -> str:
    data = Path(path).read_bytes()
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as err:
        raise Utf8Error(err) from err


def _read_text_as_format(path: str | os.PathLike[str]) -> str:
    data = Path(path).read_bytes()
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as err:
        raise FormatError(str(err)) from err


def _parse_lines(text: str) -> list[Any]:
    return [_loads(line) for line in _split_lines(text) if line.strip()]


def parse_json(path: str | os.PathLike[str]) -> list[Any]:
    """Parse a JSON or JSON Lines file.

    A file with more than one line is read as JSON Lines, blank lines skipped;
    otherwise the whole file is one JSON value, returned as a one-item list.
    """
    text = _read_text(path)
    if len(_split_lines(text)) > 1:
        return _parse_lines(text)
    return [_loads(text)]


def parse_jsonl_parallel(path: str | os.PathLike[str]) -> list[Any]:
    """Parse a JSON Lines file, one value per non-blank line."""
    return _parse_lines(_read_text(path))


def parse_jsonl_parallel_simd(path: str | os.PathLike[str]) -> list[Any]:
    """Parse a JSON Lines file, one value per non-blank line."""
    return _parse_lines(_read_text(path))


def parse_streaming(path: str | os.PathLike[str]) -> Any:
    """Parse the first JSON value of a file; anything after it is ignored."""
    text = _read_text_as_format(path)
    start = _WHITESPACE.match(text).end()
    try:
        value, _ = _DECODER.raw_decode(text, start)
    except (ValueError, RecursionError) as err:
        raise FormatError(str(err)) from err
    return value


def parse_simd(path: str | os.PathLike[str]) -> list[Any]:
    """Parse a whole file as one JSON value, returned as a one-item list."""
    return [_loads(_read_text_as_format(path))]


def parse_auto(path: str | os.PathLike[str]) -> list[Any]:
    """Pick a strategy by file size.

    Small files go through parse_json. Large ones are tried as JSON Lines
    first and, if that fails or yields nothing, read as a single value.
    """
    if os.stat(path).st_size < AUTO_THRESHOLD:
        return parse_json(path)
    try:
        values = parse_jsonl_parallel(path)
    except (FormatError, Utf8Error, OSError):
        values = []
    if values:
        return values
    return [parse_streaming(path)]


def _iter_stream(path: Path) -> Iterator[Any]:
    text = _read_text_as_format(path)
    pos = 0
    while True:
        pos = _WHITESPACE.match(text, pos).end()
        if pos == len(text):
            return
        try:
            value, pos = _DECODER.raw_decode(text, pos)
        except (ValueError, RecursionError) as err:
            raise FormatError(str(err)) from err
        yield value


def _iter_jsonl(path: Path) -> Iterator[Any]:
    with path.open("rb") as fh:
        for raw in fh:
            if raw.endswith(b"\n"):
                raw = raw[:-1].removesuffix(b"\r")
            try:
                line = raw.decode("utf-8")
            except UnicodeDecodeError:
                continue
            if line.strip():
                yield _loads(line)


def iter_objects(path: str | os.PathLike[str]) -> Iterator[Any]:
    """Iterate over the JSON values of a file.

    A file starting with '[' yields its successive top-level values; any
    other file is read as JSON Lines, skipping blank and undecodable lines.
    Parse errors are raised as FormatError when reached.
    """
    file_path = Path(path)
    with file_path.open("rb") as fh:
        head = fh.read(_ITER_PROBE)
    if head.lstrip().startswith(b"["):
        return _iter_stream(file_path)
    return _iter_jsonl(file_path)


def _detect_jsonl(path: str | os.PathLike[str]) -> bool:
    with Path(path).open("rb") as fh:
        head = fh.read(_DETECT_PROBE).lstrip()
    return not (head.startswith(b"[") or head.startswith(b"{"))


def parse_mode(path: str | os.PathLike[str], mode: str | None = None) -> list[Any]:
    """Parse with an explicit mode: 'jsonl', 'stream' or 'simd'.

    Any other mode detects the format from the first non-blank byte.
    """
    if mode == "jsonl":
        return parse_jsonl_parallel_simd(path)
    if mode == "stream":
        return [parse_streaming(path)]
    if mode == "simd":
        return parse_simd(path)
    if _detect_jsonl(path):
        return parse_jsonl_parallel_simd(path)
    return parse_simd(path)


def parse_as_document(path: str | os.PathLike[str]) -> Document:
    """Parse a file and lay out each value as one compact JSON line.

    A file holding a single array contributes one line per element.
    """
    values = parse_auto(path)
    if len(values) == 1 and isinstance(values[0], list):
        values = list(values[0])
    buffer = bytearray()
    offsets: list[tuple[int, int]] = []
    for value in values:
        encoded = _dumps(value).encode("utf-8")
        offsets.append((len(buffer), len(encoded)))
        buffer += encoded
        buffer += b"\n"
    return Document(bytes(buffer), offsets)


def convert_to_jsonl(
    input_path: str | os.PathLike[str], output_path: str | os.PathLike[str]
) -> int | None:
    """Write each element of a JSON array file as one line of a JSON Lines file.

    Returns the number of elements written, or None when the input is not an
    array, in which case the output file is left empty.
    """
    value = _loads(_read_text_as_format(input_path))
    with Path(output_path).open("w", encoding="utf-8", newline="\n") as out:
        if not isinstance(value, list):
            return None
        for item in value:
            out.write(_dumps(item))
            out.write("\n")
    return len(value)