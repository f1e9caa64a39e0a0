"""Main board identity from the DMI tables in sysfs."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Union

PathLike = Union[str, "os.PathLike[str]"]

DEFAULT_DMI_CANDIDATES = ("/sys/devices/virtual/dmi/", "/sys/class/dmi/")
UNKNOWN = "<unknown>"


@dataclass
class MainBoard:
    """Vendor, name, version and serial number of the main board."""

    vendor: str = ""
    name: str = ""
    version: str = ""
    serial_number: str = ""


def dmi_value(name: str, candidates: Iterable[PathLike] = DEFAULT_DMI_CANDIDATES) -> str:
    """Return the first non-empty ``id/<name>`` value among ``candidates``."""
    for candidate in candidates:
        try:
            with open(
                Path(candidate) / "id" / name, encoding="utf-8", errors="replace", newline=""
            ) as stream:
                value = stream.readline().removesuffix("\n")
        except OSError:
            continue
        if value:
            return value
    return UNKNOWN


def read_mainboard(candidates: Iterable[PathLike] = DEFAULT_DMI_CANDIDATES) -> MainBoard:
    """Read the main board identity from the DMI directories ``candidates``."""
    paths = tuple(candidates)
    return MainBoard(
        vendor=dmi_value("board_vendor", paths),
        name=dmi_value("board_name", paths),
        version=dmi_value("board_version", paths),
        serial_number=dmi_value("board_serial", paths),
    )