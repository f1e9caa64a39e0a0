"""Filesystem helpers for reading sysfs and procfs values."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from itertools import islice
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class Jiffies:
    """Total and busy CPU time counters taken from one ``/proc/stat`` line."""

    all: int = -1
    working: int = -1


def exists(path: PathLike) -> bool:
    """Return whether ``path`` can be stat'ed."""
    try:
        os.stat(path)
    except OSError:
        return False
    return True


def directory_entries(path: PathLike) -> list[str]:
    """Return the names in directory ``path``, or [] if it cannot be read."""
    try:
        return os.listdir(path)
    except OSError:
        return []


def _parse_leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"no integer at start of {text!r}")
    return int(match.group(1))


def read_int(path: PathLike) -> int:
    """Read the integer at the start of the first line of ``path``.

    Returns -1 when the file cannot be read or holds no integer.
    """
    try:
        with open(path, encoding="utf-8", errors="replace") as stream:
            line = stream.readline()
    except OSError:
        return -1
    try:
        return _parse_leading_int(line)
    except ValueError:
        return -1


def read_jiffies(index: int, stat_path: PathLike = "/proc/stat") -> Jiffies:
    """Read the jiffies counters from line ``index`` of ``stat_path``.

    Line 0 holds the totals of all CPUs, line ``n + 1`` those of CPU ``n``.
    Returns ``Jiffies()`` when the file cannot be opened; raises ValueError
    when the line is missing or does not hold ten counters.
    """
    try:
        with open(Path(stat_path), encoding="utf-8", errors="replace") as stream:
            line = next(islice(stream, index, None), "")
    except OSError:
        return Jiffies()
    fields = line.split()
    if len(fields) < 11:
        raise ValueError(f"line {index} of {stat_path} has too few fields")
    counters = [_parse_leading_int(field) for field in fields[1:11]]
    return Jiffies(all=sum(counters), working=sum(counters[:3]))