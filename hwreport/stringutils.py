"""Small string helpers used when parsing kernel and sysfs text files."""

from __future__ import annotations

from typing import Sequence, TypeVar

T = TypeVar("T")

_WHITESPACE = " \t\n"


def strip(text: str) -> str:
    """Remove spaces, tabs and newlines from both ends of ``text``."""
    return text.strip(_WHITESPACE)


def _check_delimiter(delimiter: str) -> None:
    if not delimiter:
        raise ValueError("delimiter must not be empty")


def count_substring(text: str, substring: str) -> int:
    """Count non-overlapping occurrences of ``substring`` in ``text``."""
    _check_delimiter(substring)
    return text.count(substring)


def split(text: str, delimiter: str) -> list[str]:
    """Split ``text`` at every ``delimiter``, keeping the final piece."""
    _check_delimiter(delimiter)
    return text.split(delimiter)


def split_terminated(text: str, delimiter: str) -> list[str]:
    """Split ``text`` into the pieces that are each ended by ``delimiter``.

    Anything after the last delimiter is dropped.
    """
    _check_delimiter(delimiter)
    return text.split(delimiter)[:-1]


def split_get_index(text: str, delimiter: str, index: int) -> str:
    """Return the piece at ``index`` after splitting at ``delimiter``.

    A negative index counts from the end; an index out of range gives "".
    """
    pieces = split(text, delimiter)
    if index < 0:
        index += len(pieces)
    if not 0 <= index < len(pieces):
        return ""
    return pieces[index]


def get_value(data: Sequence[T], index: int, default: T) -> T:
    """Return ``data[index]``, or ``default`` when the index is out of range."""
    if 0 <= index < len(data):
        return data[index]
    return default