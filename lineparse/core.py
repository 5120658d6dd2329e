"""Line-indexed document model shared by the file parsers."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


class ParseError(Exception):
    """Base class for every error raised while parsing or reading a document."""


class FormatError(ParseError):
    """The content does not follow the expected format."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Format error: {message}")
        self.message = message


class Utf8Error(ParseError):
    """A line is not valid UTF-8."""

    def __init__(self, reason: object) -> None:
        super().__init__(f"UTF-8 error: {reason}")
        self.reason = reason


class LineIndexError(ParseError, IndexError):
    """A line index or range lies outside the document."""

    def __init__(self, index: int) -> None:
        super().__init__(f"Index out of bounds: {index}")
        self.index = index


def _decode_checked(raw: bytes) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as err:
        raise Utf8Error(err) from err


@dataclass
class Document:
    """Raw bytes plus the (offset, length) of every indexed line."""

    data: bytes
    offsets: list[tuple[int, int]] = field(default_factory=list)

    def _raw(self, start: int, length: int) -> bytes:
        return bytes(self.data[start:start + length])

    def _slice(self, idx: int) -> bytes:
        if not 0 <= idx < len(self.offsets):
            raise LineIndexError(idx)
        return self._raw(*self.offsets[idx])

    def lines(self) -> Iterator[str]:
        """Yield every line without re-checking its encoding.

        Bytes that are not valid UTF-8 are kept as surrogate escapes.
        """
        for start, length in self.offsets:
            yield self._raw(start, length).decode("utf-8", "surrogateescape")

    def __iter__(self) -> Iterator[str]:
        return self.lines()

    def __len__(self) -> int:
        return len(self.offsets)

    def lines_range(self, start: int, end: int) -> list[str]:
        """Return the lines in the half-open range [start, end)."""
        if start < 0:
            raise LineIndexError(start)
        if start > end or end > len(self.offsets):
            raise LineIndexError(end)
        return [self.get_line(idx) for idx in range(start, end)]

    def line_count(self) -> int:
        """Number of indexed lines."""
        return len(self.offsets)

    def get_line(self, idx: int) -> str:
        """Return one line, bounds-checked but without an encoding check."""
        return self._slice(idx).decode("utf-8", "surrogateescape")

    def get_line_safe(self, idx: int) -> str:
        """Return one line, checking both the bounds and the UTF-8 encoding."""
        return _decode_checked(self._slice(idx))

    @staticmethod
    def streaming_lines(data: bytes) -> Iterator[str]:
        """Split raw bytes on newlines lazily, without building an index.

        Raises Utf8Error when the line being produced is not valid UTF-8.
        """
        view = bytes(data)
        start = 0
        while True:
            nl = view.find(b"\n", start)
            if nl == -1:
                yield _decode_checked(view[start:])
                return
            yield _decode_checked(view[start:nl])
            start = nl + 1