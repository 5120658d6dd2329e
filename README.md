# lineparse

Load text, CSV/TSV and JSON/JSONL files into a `Document`: the raw bytes
of the file plus an index of `(offset, length)` pairs, one for each line.
Lines can then be read one at a time, by range, or all in order.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

## The `Document`

`lineparse.core.Document` holds `data` (bytes) and `offsets` (a list of
`(offset, length)` tuples). Line terminators (`\n`, and a `\r` just
before it) are never part of a line.

- `lines()` yields every line in order; `Document` is also iterable and
  supports `len()`.
- `get_line(idx)` returns one line, raising `LineIndexError` when `idx`
  is out of bounds.
- `get_line_safe(idx)` does the same and also raises `Utf8Error` if the
  line is not valid UTF-8 (`lines()` and `get_line()` keep such bytes as
  surrogate escapes instead).
- `lines_range(start, end)` returns the lines of `[start, end)`.
- `line_count()` is the number of indexed lines.
- `Document.streaming_lines(data)` splits raw bytes on `\n` lazily,
  without building an index.

## Library use

```python
from lineparse.txt import parse_txt
from lineparse.csvfile import parse_csv, parse_with_partial_index, detect_separator
from lineparse.jsonfile import parse_as_document, parse_auto, iter_objects, convert_to_jsonl

doc = parse_txt("notes.txt")
print(doc.line_count())
print(doc.get_line(1))
for line in doc.lines():
    ...

# CSV or TSV; every indexed line is checked for valid UTF-8
table = parse_csv("data.csv", False)
first_rows = table.lines_range(0, 10)

# Index only every 100th line of a large file
sparse = parse_with_partial_index("big.csv", 100, False)

# Guess the separator (b"\t" or b",") from the first 4096 bytes
sep = detect_separator(open("data.tsv", "rb").read())

# JSON: one compact line per value; a top-level array is split into its elements
records = parse_as_document("records.json")

# Plain values
values = parse_auto("events.jsonl")

# Lazy iteration: JSON Lines one value per line; a file starting with "["
# yields its successive top-level values (the array itself as one value)
for obj in iter_objects("events.jsonl"):
    ...

# Rewrite a JSON array file as JSON Lines; returns the element count,
# or None when the input is not an array
count = convert_to_jsonl("records.json", "records.jsonl")
```

`lineparse.jsonfile` also offers `parse_json`, `parse_simd`,
`parse_streaming`, `parse_jsonl_parallel`, `parse_jsonl_parallel_simd`
and `parse_mode(path, mode)` with modes `"jsonl"`, `"stream"` and
`"simd"`; any other mode detects the format from the first non-blank
byte. `parse_auto` loads files under 512 MiB through `parse_json`, and
reads larger ones as JSON Lines first, then as a single value.

Every parsing failure raises a subclass of `lineparse.core.ParseError`:
`FormatError` for bad JSON, `Utf8Error` for invalid UTF-8, and
`LineIndexError` (also an `IndexError`) for a line number or range out of
bounds. Errors from opening or reading a file come through as `OSError`.

The CSV functions index lines only; they do not split lines into fields.

## Commands

```
lineparse notes.txt
lineparse-txt notes.txt
lineparse-csv data.csv
lineparse-json records.jsonl
```

Each command parses the file it is given and prints nothing when parsing
succeeds. Exit codes:

- `0`: the file parsed
- `1`: the file could not be parsed; the error is printed to stderr
- `2`: the file extension is not accepted by that command
- `101`: no file was given; a usage line is printed to stderr

`lineparse-txt` takes `.txt`, `lineparse-csv` takes `.csv` or `.tsv`, and
`lineparse-json` takes `.json` or `.jsonl` (parsed with `parse_auto`).
`lineparse` parses any file as text and never exits with `2`.