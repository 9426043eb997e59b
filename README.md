# crusttools

Two small command-line tools: `crust-wc`, a word counter, and
`crust-jsoncheck`, a checker for flat JSON objects whose keys and values are
all strings. Both need nothing beyond the Python standard library.

## Installation

```
pip install .
```

## crust-wc

Counts lines, words and bytes in a single file.

```
crust-wc notes.txt          # lines words bytes path
crust-wc -l notes.txt       # newline count only
crust-wc -w notes.txt       # word count only
crust-wc -c notes.txt       # byte count only
crust-wc -m notes.txt       # character count only
crust-wc -h                 # help
```

- A word starts at a printable ASCII byte (`!` to `~`) and ends at a space,
  tab or newline. Other bytes neither start nor end a word.
- Lines are counted as newline bytes.
- Characters are counted as bytes, so `-m` prints the same number as `-c`.
- Flags may be written with one or two dashes (`-l` or `--l`); `--` ends the
  flags. If several count flags are given, the first of `-c`, `-m`, `-l`,
  `-w` in that order decides what is printed.
- Exactly one input file is accepted. With no file, a second file, an unknown
  flag or a file that cannot be read, an error goes to standard error and the
  exit status is 1.

From Python:

```python
from crusttools.wc import file_stats, format_report

stats = file_stats(b"hello world\n")
print(format_report(stats, "example.txt", None))   # "1 2 12 example.txt"
print(format_report(stats, "example.txt", "words"))  # "2 example.txt"
```

`file_stats(data)` returns a frozen `FileStats` with the fields `bytes`,
`chars`, `lines` and `words`. `format_report(stats, path, mode)` takes a mode
of `"bytes"`, `"chars"`, `"lines"`, `"words"` or `None`, and raises
`ValueError` for any other mode.

## crust-jsoncheck

Checks a file that holds a single object such as
`{"key": "value", "other": "thing"}`.

```
crust-jsoncheck data.json
crust-jsoncheck -h
```

On success it prints `Json file: data.json is VALID` and exits with status 0.
It exits with status 1, with a message on standard error, when:

- no file is given, or more than one;
- the file name does not end in `.json` (any letter case);
- the file cannot be read or is empty;
- the contents are malformed: a missing `{`, a key or value that is not a
  quoted string, a missing `:`, a missing `,` or `}` after a pair, a trailing
  comma, or an unterminated string.

Spaces, tabs, carriage returns and newlines are allowed between tokens. Inside
a string, a backslash makes the next byte part of the string; escapes are not
otherwise checked. Anything after the closing `}` is not examined.

From Python:

```python
from crusttools.jsoncheck import JsonSyntaxError, validate_object

try:
    end = validate_object(b'{"key": "value"}')   # offset just past the "}"
except JsonSyntaxError as err:
    print(err, err.offset)
```

`validate_object` accepts `bytes` or `str` (a `str` is encoded as UTF-8).
`JsonSyntaxError` is a `ValueError` carrying the byte `offset` where the
problem was found. The helpers `skip_whitespace(data, pos)` and
`parse_string(data, pos)` return the offset after whitespace or after a quoted
string.

## What it does not do

- `crust-jsoncheck` is not a general JSON validator. It accepts only one flat
  object of string keys and string values. Numbers, `true`, `false`, `null`,
  arrays and nested objects are all reported as errors.
- `crust-wc` reads one named file only; it does not read standard input, does
  not total several files and does not decode multi-byte characters.

Both tools can also be run as `python -m crusttools.wc` and
`python -m crusttools.jsoncheck`.

## Running the tests

```
pip install .[test]
pytest
```