"""Path and text helpers for writing generated files."""

from __future__ import annotations

from collections.abc import Iterable

from xlwgen.errors import GeneratorError

_SEPARATORS = "/\\"


def _last_separator(path: str) -> int:
    """Index of the last separator after position 0, or -1."""
    for index in range(len(path) - 1, 0, -1):
        if path[index] in _SEPARATORS:
            return index
    return -1


def strip_path(path: str) -> str:
    """Return the file name part of a path (separator at position 0 is ignored)."""
    index = _last_separator(path)
    return path if index == -1 else path[index + 1 :]


def get_dir(path: str) -> str:
    """Return the directory part of a path, or an empty string if there is none."""
    index = _last_separator(path)
    return "" if index == -1 else path[:index]


def join_lines(lines: Iterable[str]) -> str:
    """Join lines, ending each with a newline."""
    return "".join(f"{line}\n" for line in lines)


def write_output_file(path: str, text: str) -> None:
    """Write generated text to a file."""
    try:
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(text)
    except OSError as exc:
        raise GeneratorError("output file not created") from exc