"""Block devices listed under ``/sys/class/block``."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Optional, Union

from .filesystem import directory_entries, exists
from .stringutils import strip

PathLike = Union[str, "os.PathLike[str]"]

DEFAULT_BASE_PATH = "/sys/class/block/"
UNKNOWN = "<unknown>"

# Linux reports sizes in 512-byte sectors whatever the device's real block size.
BLOCK_SIZE = 512

_PARTITION = re.compile(r"(sd[a-z]|nvme\d+n\d+)p?\d+$")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass
class Disk:
    """One physical disk."""

    vendor: str = ""
    model: str = ""
    serial_number: str = ""
    size_bytes: int = -1
    id: int = -1


def _read_first_line(path: str) -> Optional[str]:
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as stream:
            return stream.readline().removesuffix("\n")
    except OSError:
        return None


def _read_stripped(path: str) -> str:
    value = _read_first_line(path)
    return UNKNOWN if value is None else strip(value)


def is_partition(path: PathLike) -> bool:
    """Return whether ``path`` names a partition rather than a whole disk."""
    return _PARTITION.search(os.fspath(path)) is not None


def disk_vendor(path: PathLike) -> str:
    """Return the vendor of the disk at ``path``.

    NVMe vendors live under the controller in ``../nvme/nvmeN`` rather than
    under the block device itself.
    """
    path = os.fspath(path)
    vendor_path = path
    nvme_pos = path.find("nvme")
    if nvme_pos != -1:
        nvme_name = path[nvme_pos:nvme_pos + 5]
        prefix = path[:nvme_pos - 6] if nvme_pos >= 6 else path
        vendor_path = prefix + "nvme/" + nvme_name
    return _read_stripped(vendor_path + "/device/vendor")


def disk_model(path: PathLike) -> str:
    """Return the model of the disk at ``path``."""
    return _read_stripped(os.fspath(path) + "/device/model")


def disk_serial_number(path: PathLike) -> str:
    """Return the serial number of the disk at ``path``."""
    return _read_stripped(os.fspath(path) + "/device/serial")


def disk_size_bytes(path: PathLike) -> int:
    """Return the size of the disk at ``path`` in bytes, or -1 if unreadable."""
    try:
        with open(os.fspath(path) + "/size", encoding="utf-8", errors="replace") as stream:
            text = stream.read()
    except OSError:
        return -1
    match = _LEADING_INT.match(text)
    sectors = int(match.group(1)) if match else 0
    return sectors * BLOCK_SIZE


def all_disks(base_path: PathLike = DEFAULT_BASE_PATH) -> list[Disk]:
    """Return every whole disk under ``base_path`` that reports any identity."""
    base = os.path.join(os.fspath(base_path), "")
    disks = []
    for entry in directory_entries(base):
        path = base + entry
        if not exists(path) or is_partition(path):
            continue
        vendor = disk_vendor(path)
        model = disk_model(path)
        serial = disk_serial_number(path)
        # Every block device has a size, so identity decides what counts as a disk.
        if vendor == UNKNOWN and model == UNKNOWN and serial == UNKNOWN:
            continue
        disks.append(
            Disk(
                vendor=vendor,
                model=model,
                serial_number=serial,
                size_bytes=disk_size_bytes(path),
            )
        )
    return disks