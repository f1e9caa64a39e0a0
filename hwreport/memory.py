"""System memory as reported by ``/proc/meminfo``."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Union

from .stringutils import split, strip

PathLike = Union[str, "os.PathLike[str]"]

DEFAULT_MEMINFO_PATH = "/proc/meminfo"
UNKNOWN = "<unknown>"

_KEYS = {"MemTotal": "total", "MemFree": "free", "MemAvailable": "available"}


@dataclass(frozen=True)
class MemInfo:
    """Total, free and available memory in bytes; -1 when unknown."""

    total: int = -1
    free: int = -1
    available: int = -1

    @property
    def complete(self) -> bool:
        return -1 not in (self.total, self.free, self.available)


@dataclass
class MemoryModule:
    """One memory module."""

    id: int = 0
    vendor: str = UNKNOWN
    name: str = UNKNOWN
    model: str = UNKNOWN
    serial_number: str = UNKNOWN
    total_bytes: int = -1
    frequency_hz: int = -1


def _sysconf(name: str) -> int:
    try:
        return os.sysconf(name)
    except (AttributeError, ValueError, OSError):
        return -1


def _with_sysconf(info: MemInfo) -> MemInfo:
    pages = _sysconf("SC_PHYS_PAGES")
    available_pages = _sysconf("SC_AVPHYS_PAGES")
    page_size = _sysconf("SC_PAGE_SIZE")
    if pages > 0 and page_size > 0:
        info = replace(info, total=pages * page_size)
    if available_pages > 0 and page_size > 0:
        info = replace(info, available=available_pages * page_size)
    return info


def _kib_value(line: str) -> int | None:
    parts = split(line, ":")
    if len(parts) != 2:
        return None
    value = strip(parts[1])
    number, space, _ = value.partition(" ")
    if not space:
        return None
    return int(number) * 1024


def parse_meminfo(text: str) -> MemInfo:
    """Parse MemTotal, MemFree and MemAvailable from ``/proc/meminfo`` text."""
    info = MemInfo()
    for line in text.split("\n"):
        if info.complete:
            break
        for key, attribute in _KEYS.items():
            if line.startswith(key):
                value = _kib_value(line)
                if value is not None:
                    info = replace(info, **{attribute: value})
                break
    return info


def read_meminfo(path: PathLike = DEFAULT_MEMINFO_PATH) -> MemInfo:
    """Read ``path``, falling back to sysconf for what it does not give."""
    try:
        text = Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError:
        return _with_sysconf(MemInfo())
    info = parse_meminfo(text)
    if info.total == -1 or info.available == -1:
        info = _with_sysconf(info)
    return info


class Memory:
    """The installed memory, seen as a single module."""

    def __init__(self, meminfo_path: PathLike = DEFAULT_MEMINFO_PATH) -> None:
        self.meminfo_path = meminfo_path
        self.modules: list[MemoryModule] = [
            MemoryModule(id=0, total_bytes=read_meminfo(meminfo_path).total)
        ]

    def __repr__(self) -> str:
        return f"Memory(modules={self.modules!r})"

    def total_bytes(self) -> int:
        """Return the summed size of all modules."""
        return sum(module.total_bytes for module in self.modules)

    def free_bytes(self) -> int:
        """Return the currently free memory in bytes."""
        return read_meminfo(self.meminfo_path).free

    def available_bytes(self) -> int:
        """Return the currently available memory in bytes."""
        return read_meminfo(self.meminfo_path).available