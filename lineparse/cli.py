"""Command-line entry points that parse one file and report success by exit code."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

from .core import ParseError
from .csvfile import parse_csv
from .jsonfile import parse_auto
from .txt import parse_txt

EXIT_OK = 0
EXIT_PARSE_ERROR = 1
EXIT_BAD_EXTENSION = 2
EXIT_USAGE = 101


def _first_argument(argv: Sequence[str] | None, usage: str) -> Path | None:
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print(usage, file=sys.stderr)
        return None
    return Path(args[0])


def _extension(path: Path) -> str:
    return path.suffix[1:].lower()


def _run_checked(
    argv: Sequence[str] | None,
    usage: str,
    extensions: frozenset[str],
    extension_message: str,
    label: str,
    parse: Callable[[Path], Any],
) -> int:
    path = _first_argument(argv, usage)
    if path is None:
        return EXIT_USAGE
    if _extension(path) not in extensions:
        print(extension_message, file=sys.stderr)
        return EXIT_BAD_EXTENSION
    try:
        parse(path)
    except (ParseError, OSError) as err:
        print(f"{label} parse error: {err}", file=sys.stderr)
        return EXIT_PARSE_ERROR
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    """Parse a text file of any extension; exit 1 on failure."""
    path = _first_argument(argv, "Usage: parser-cli <file.txt>")
    if path is None:
        return EXIT_USAGE
    try:
        parse_txt(path)
    except (ParseError, OSError) as err:
        print(f"Error: {err}", file=sys.stderr)
        return EXIT_PARSE_ERROR
    return EXIT_OK


def txt_main(argv: Sequence[str] | None = None) -> int:
    """Parse a .txt file: exit 0 on success, 1 on a parse error, 2 on a wrong extension."""
    return _run_checked(
        argv,
        "Usage: txt-cli <file.txt>",
        frozenset({"txt"}),
        "Error: this parser only accepts .txt files",
        "TXT",
        parse_txt,
    )


def csv_main(argv: Sequence[str] | None = None) -> int:
    """Parse a .csv or .tsv file: exit 0 on success, 1 on a parse error, 2 on a wrong extension."""
    return _run_checked(
        argv,
        "Usage: csv-cli <file.csv>",
        frozenset({"csv", "tsv"}),
        "Error: this parser only accepts .csv or .tsv files",
        "CSV",
        parse_csv,
    )


def json_main(argv: Sequence[str] | None = None) -> int:
    """Parse a .json or .jsonl file: exit 0 on success, 1 on a parse error, 2 on a wrong extension."""
    return _run_checked(
        argv,
        "Usage: json-cli <file.json/jsonl>",
        frozenset({"json", "jsonl"}),
        "Error: this parser only accepts .json or .jsonl files",
        "JSON",
        parse_auto,
    )


if __name__ == "__main__":
    sys.exit(main())