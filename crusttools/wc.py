"""Count lines, words and bytes in a file."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

_WORD_BREAKS = frozenset(b" \n\t")

# Flag name, report mode, description; earlier flags take precedence.
_COUNT_FLAGS = (
    ("c", "bytes", "Print the byte counts"),
    ("m", "chars", "Print the character counts"),
    ("l", "lines", "Print the newline counts"),
    ("w", "words", "Print the word counts"),
)
_HELP_FLAG = ("h", "Print this help message")
_MODES = frozenset(mode for _, mode, _ in _COUNT_FLAGS)


@dataclass(frozen=True)
class FileStats:
    """Counts gathered from the contents of one file."""

    bytes: int
    chars: int
    lines: int
    words: int


def file_stats(data: bytes) -> FileStats:
    """Count bytes, characters, newlines and words in ``data``.

    A word starts at a printable ASCII byte and ends at a space, tab or
    newline. Characters are counted as bytes.
    """
    words = 0
    in_word = False
    for byte in data:
        if 0x21 <= byte <= 0x7E:
            if not in_word:
                in_word = True
                words += 1
        elif byte in _WORD_BREAKS:
            in_word = False
    return FileStats(
        bytes=len(data),
        chars=len(data),
        lines=data.count(b"\n"),
        words=words,
    )


def format_report(stats: FileStats, path: str, mode: str | None = None) -> str:
    """Render one report line.

    ``mode`` is one of ``"bytes"``, ``"chars"``, ``"lines"``, ``"words"``
    for a single count, or ``None`` for lines, words and bytes together.
    """
    if mode is None:
        return f"{stats.lines} {stats.words} {stats.bytes} {path}"
    if mode not in _MODES:
        raise ValueError(f"unknown report mode: {mode!r}")
    return f"{getattr(stats, mode)} {path}"


class _UsageError(Exception):
    def __init__(self, message: str, show_usage: bool = True) -> None:
        super().__init__(message)
        self.show_usage = show_usage


def _parse_args(args: list[str], known: set[str]) -> tuple[set[str], str | None]:
    enabled: set[str] = set()
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
            if name not in known:
                raise _UsageError(f"ERROR: -{name}: unknown flag")
            enabled.add(name)
            continue
        if input_path is not None:
            raise _UsageError(
                "ERROR: Several input files is not supported yet", show_usage=False
            )
        input_path = arg
    return enabled, input_path


def _program_name() -> str:
    if sys.argv and sys.argv[0]:
        return Path(sys.argv[0]).name
    return "wc"


def _usage() -> None:
    err = sys.stderr
    print(f"Usage: {_program_name()} [OPTIONS] <input.b>", file=err)
    print("OPTIONS:", file=err)
    for name, _, description in (*_COUNT_FLAGS, (_HELP_FLAG[0], None, _HELP_FLAG[1])):
        print(f"    -{name}\n        {description}", file=err)


def main(argv: list[str] | None = None) -> int:
    """Run the word counter; return the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    known = {name for name, _, _ in _COUNT_FLAGS} | {_HELP_FLAG[0]}

    try:
        enabled, input_path = _parse_args(args, known)
    except _UsageError as exc:
        if exc.show_usage:
            _usage()
        print(exc, file=sys.stderr)
        return 1

    if _HELP_FLAG[0] in enabled:
        _usage()
        return 0

    if input_path is None:
        _usage()
        print("ERROR: no input is provided", file=sys.stderr)
        return 1

    try:
        data = Path(input_path).read_bytes()
    except OSError as exc:
        print(f"ERROR: Could not read file {input_path}: {exc.strerror}", file=sys.stderr)
        return 1

    mode = next((mode for name, mode, _ in _COUNT_FLAGS if name in enabled), None)
    print(format_report(file_stats(data), input_path, mode))
    return 0


if __name__ == "__main__":
    sys.exit(main())