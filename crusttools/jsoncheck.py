"""Check that a file holds a flat JSON object of string pairs."""

from __future__ import annotations

import sys
from pathlib import Path

_WHITESPACE = frozenset(b" \n\r\t")
_OPEN_BRACE = ord("{")
_CLOSE_BRACE = ord("}")
_COLON = ord(":")
_COMMA = ord(",")
_QUOTE = ord('"')
_BACKSLASH = ord("\\")
_HELP_FLAG = ("h", "Print this help message")


class JsonSyntaxError(ValueError):
    """Raised when the input is not a valid object."""

    def __init__(self, message: str, offset: int | None = None) -> None:
        super().__init__(message)
        self.offset = offset


def _byte_at(data: bytes, pos: int) -> int:
    """Return the byte at ``pos``, or 0 past the end of ``data``."""
    return data[pos] if pos < len(data) else 0


def skip_whitespace(data: bytes, pos: int = 0) -> int:
    """Return the first offset at or after ``pos`` that is not whitespace."""
    while pos < len(data) and data[pos] in _WHITESPACE:
        pos += 1
    return pos


def parse_string(data: bytes, pos: int) -> int:
    """Skip the quoted string starting at ``pos``; return the offset after it."""
    if _byte_at(data, pos) != _QUOTE:
        raise ValueError(f"no string starts at offset {pos}")
    start = pos
    pos += 1
    while (byte := _byte_at(data, pos)) != 0:
        if byte == _QUOTE:
            return pos + 1
        if byte == _BACKSLASH and _byte_at(data, pos + 1) != 0:
            pos += 2
        else:
            pos += 1
    raise JsonSyntaxError("Unterminated string", start)


def validate_object(data: bytes | str) -> int:
    """Validate an object of string keys and string values.

    Returns the offset just past the closing brace; anything after it is
    not examined.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")

    pos = skip_whitespace(data, 0)
    if _byte_at(data, pos) != _OPEN_BRACE:
        raise JsonSyntaxError("ERROR: Expected '{' at start of input", pos)
    pos += 1
    trailing_comma = False

    while True:
        pos = skip_whitespace(data, pos)
        byte = _byte_at(data, pos)

        if byte == _CLOSE_BRACE:
            if trailing_comma:
                raise JsonSyntaxError("ERROR: Trailing comma", pos)
            return pos + 1

        if byte != _QUOTE:
            raise JsonSyntaxError("ERROR: Expected '}' or \"key\" after '{'", pos)

        pos = skip_whitespace(data, parse_string(data, pos))
        trailing_comma = False

        if _byte_at(data, pos) != _COLON:
            raise JsonSyntaxError("Unexpected End-of-File after ':'", pos)
        pos = skip_whitespace(data, pos + 1)

        if _byte_at(data, pos) != _QUOTE:
            raise JsonSyntaxError("Expected literal or \"value\" ':'", pos)
        pos = skip_whitespace(data, parse_string(data, pos))

        byte = _byte_at(data, pos)
        if byte == _COMMA:
            pos += 1
            trailing_comma = True
            continue
        if byte == _CLOSE_BRACE:
            return pos + 1
        raise JsonSyntaxError("ERROR: Expected ',' or '}' after pair", pos)


class _UsageError(Exception):
    def __init__(self, message: str, show_usage: bool = True) -> None:
        super().__init__(message)
        self.show_usage = show_usage


def _parse_args(args: list[str]) -> tuple[bool, str | None]:
    show_help = False
    input_path: str | None = None
    only_positional = False
    for arg in args:
        if not only_positional and arg == "--":
            only_positional = True
            continue
        if not only_positional and arg.startswith("-") and len(arg) > 1:
            name = arg[1:]
            if name.startswith("-"):
                name = name[1:]
            if name != _HELP_FLAG[0]:
                raise _UsageError(f"ERROR: -{name}: unknown flag")
            show_help = True
            continue
        if input_path is not None:
            raise _UsageError(
                "ERROR: Several input files is not supported yet", show_usage=False
            )
        input_path = arg
    return show_help, input_path


def _program_name() -> str:
    if sys.argv and sys.argv[0]:
        return Path(sys.argv[0]).name
    return "jsoncheck"


def _usage() -> None:
    err = sys.stderr
    print(f"Usage: {_program_name()} [OPTIONS] <input.json>", file=err)
    print("OPTIONS:", file=err)
    print(f"    -{_HELP_FLAG[0]}\n        {_HELP_FLAG[1]}", file=err)


def _has_json_extension(path: str) -> bool:
    head, dot, tail = path.rpartition(".")
    return bool(dot) and tail.lower() == "json"


def main(argv: list[str] | None = None) -> int:
    """Run the checker; return the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)

    try:
        show_help, input_path = _parse_args(args)
    except _UsageError as exc:
        if exc.show_usage:
            _usage()
        print(exc, file=sys.stderr)
        return 1

    if show_help:
        _usage()
        return 0

    if input_path is None:
        _usage()
        print("ERROR: No input is provided", file=sys.stderr)
        return 1

    if not _has_json_extension(input_path):
        _usage()
        print("ERROR: Input must be a valid JSON file", file=sys.stderr)
        return 1

    try:
        data = Path(input_path).read_bytes()
    except OSError as exc:
        print(f"ERROR: Could not read file {input_path}: {exc.strerror}", file=sys.stderr)
        return 1

    if not data:
        print("ERROR: Invalid input file: can not be empty", file=sys.stderr)
        return 1

    try:
        validate_object(data)
    except JsonSyntaxError as exc:
        print(exc, file=sys.stderr)
        return 1

    print(f"Json file: {input_path} is VALID")
    return 0


if __name__ == "__main__":
    sys.exit(main())