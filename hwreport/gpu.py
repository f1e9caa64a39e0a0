"""Graphics cards listed under ``/sys/class/drm``."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .filesystem import exists
from .pcimapper import PCIMapper, default_mapper

PathLike = Union[str, "os.PathLike[str]"]

DEFAULT_DRM_ROOT = "/sys/class/drm"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass
class GPU:
    """One graphics card."""

    vendor: str = ""
    name: str = ""
    driver_version: str = ""
    memory_bytes: int = 0
    frequency_mhz: int = 0
    num_cores: int = 0
    id: int = 0
    vendor_id: str = ""
    device_id: str = ""


def read_drm(path: PathLike) -> str:
    """Return the first line of ``path``, or "" when it cannot be read."""
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as stream:
            return stream.readline().removesuffix("\n")
    except OSError:
        return ""


def _parse_int(text: str) -> Optional[int]:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


def frequencies(drm_path: PathLike) -> tuple[int, int, int]:
    """Return the (minimum, current, maximum) GT frequencies in MHz.

    Any value that cannot be parsed leaves its slot at 0 and marks the
    minimum as -1.
    """
    base = Path(drm_path)
    values = [0, 0, 0]
    for slot, name in enumerate(("gt_min_freq_mhz", "gt_cur_freq_mhz", "gt_max_freq_mhz")):
        parsed = _parse_int(read_drm(base / name))
        if parsed is None:
            values[0] = -1
        else:
            values[slot] = parsed
    return values[0], values[1], values[2]


def all_gpus(drm_root: PathLike = DEFAULT_DRM_ROOT, mapper: Optional[PCIMapper] = None) -> list[GPU]:
    """Return the cards ``card0``, ``card1``, ... found under ``drm_root``.

    Gaps among the first three card numbers are tolerated; the search stops
    at the first missing card after that.
    """
    pci = mapper if mapper is not None else default_mapper()
    root = Path(drm_root)
    gpus = []
    card_id = 0
    while True:
        path = root / f"card{card_id}"
        if not exists(path):
            if card_id > 2:
                break
            card_id += 1
            continue
        vendor_id = read_drm(path / "device" / "vendor")
        device_id = read_drm(path / "device" / "device")
        if vendor_id and device_id:
            vendor = pci[vendor_id]
            gpus.append(
                GPU(
                    vendor=vendor.vendor_name,
                    name=vendor[device_id].device_name,
                    frequency_mhz=frequencies(path)[2],
                    id=card_id,
                    vendor_id=vendor_id,
                    device_id=device_id,
                )
            )
        card_id += 1
    return gpus