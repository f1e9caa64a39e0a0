"""Operating system name, version, kernel and architecture."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from .filesystem import exists

PathLike = Union[str, "os.PathLike[str]"]

DEFAULT_OS_RELEASE = "/etc/os-release"
DEFAULT_LOADER = "/lib64/ld-linux-x86-64.so.2"
UNKNOWN = "<unknown>"


@dataclass
class OSInfo:
    """Description of the running operating system."""

    name: str = ""
    version: str = ""
    kernel: str = ""
    is_32bit: bool = False
    is_64bit: bool = False
    is_big_endian: bool = False
    is_little_endian: bool = False


def _unquoted_value(line: str) -> str:
    value = line[line.find("=") + 1:]
    return value


def parse_os_release(text: str) -> tuple[str, str]:
    """Return (name, version) from the text of an ``os-release`` file.

    Every key starting with ``VERSION`` overrides the version, so the last
    such line wins.
    """
    name = ""
    version = ""
    for line in text.split("\n"):
        if line.startswith("PRETTY_NAME"):
            line = _unquoted_value(line)
            name = line[1:-1]
        if line.startswith("VERSION"):
            line = _unquoted_value(line)
            version = line[1:-1]
    return name, version


def _kernel_release() -> str:
    try:
        return os.uname().release
    except (AttributeError, OSError):
        return UNKNOWN


def read_os(
    os_release_path: PathLike = DEFAULT_OS_RELEASE,
    loader_path: PathLike = DEFAULT_LOADER,
) -> OSInfo:
    """Describe the running system; a 64-bit system is one with ``loader_path``."""
    try:
        text = Path(os_release_path).read_text(encoding="utf-8", errors="replace")
    except OSError:
        name, version = "Linux", UNKNOWN
    else:
        name, version = parse_os_release(text)
    is_64bit = exists(loader_path)
    return OSInfo(
        name=name,
        version=version,
        kernel=_kernel_release(),
        is_32bit=not is_64bit,
        is_64bit=is_64bit,
        is_big_endian=sys.byteorder == "big",
        is_little_endian=sys.byteorder == "little",
    )