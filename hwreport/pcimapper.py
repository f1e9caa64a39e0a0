"""Lookup of PCI vendor and device names from a ``pci.ids`` database."""

from __future__ import annotations

import functools
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

_INVALID_ID = "0000"
_INVALID_NAME = "invalid"


def _strip_hex_prefix(identifier: str) -> str:
    return identifier[2:] if identifier.startswith("0x") else identifier


@dataclass
class PCIDevice:
    """A PCI device with its subsystem names."""

    device_id: str
    device_name: str
    subsystems: dict[str, str] = field(default_factory=dict)


@dataclass
class PCIVendor:
    """A PCI vendor with the devices it makes."""

    vendor_id: str
    vendor_name: str
    devices: dict[str, PCIDevice] = field(default_factory=dict)

    def device(self, device_id: str) -> PCIDevice:
        """Return the device with ``device_id``, or an "invalid" placeholder."""
        found = self.devices.get(_strip_hex_prefix(device_id))
        if found is None:
            return PCIDevice(_INVALID_ID, _INVALID_NAME)
        return found

    def __getitem__(self, device_id: str) -> PCIDevice:
        return self.device(device_id)


def _split_entry(line: str) -> Optional[tuple[str, str]]:
    parts = line.strip(" \t\n").split("  ")
    if len(parts) != 2:
        return None
    return parts[0], parts[1]


class PCIMapper:
    """Vendors and devices parsed from a ``pci.ids`` file."""

    def __init__(self, pci_ids_file: Union[str, "os.PathLike[str]"]) -> None:
        self._vendors: dict[str, PCIVendor] = {}
        vendor: Optional[PCIVendor] = None
        device: Optional[PCIDevice] = None
        with open(pci_ids_file, encoding="utf-8", errors="replace") as stream:
            for raw in stream:
                line = raw.rstrip("\n")
                if not line or line.startswith("#"):
                    continue
                entry = _split_entry(line)
                if entry is None:
                    continue
                key, name = entry
                if line.startswith("\t\t"):
                    if device is not None:
                        device.subsystems.setdefault(key, name)
                elif line.startswith("\t"):
                    if vendor is not None:
                        device = vendor.devices.setdefault(key, PCIDevice(key, name))
                else:
                    vendor = self._vendors.setdefault(key, PCIVendor(key, name))

    def vendor_from_id(self, vendor_id: str) -> PCIVendor:
        """Return the vendor with ``vendor_id``, or an "invalid" placeholder."""
        found = self._vendors.get(_strip_hex_prefix(vendor_id))
        if found is None:
            return PCIVendor(_INVALID_ID, _INVALID_NAME)
        return found

    def __getitem__(self, vendor_id: str) -> PCIVendor:
        return self.vendor_from_id(vendor_id)


@functools.lru_cache(maxsize=None)
def default_mapper() -> PCIMapper:
    """Return the mapper for ``~/.hwinfo/pci.ids``, loaded once."""
    return PCIMapper(Path.home() / ".hwinfo" / "pci.ids")