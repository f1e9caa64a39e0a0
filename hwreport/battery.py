"""Batteries listed under ``/sys/class/power_supply``."""

from __future__ import annotations

import math
import os
import re
from pathlib import Path
from typing import Optional, Union

from .filesystem import exists

PathLike = Union[str, "os.PathLike[str]"]

DEFAULT_BASE_PATH = "/sys/class/power_supply/"
UNKNOWN = "<unknown>"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class Battery:
    """A battery ``BAT<id>``; text properties are read lazily and cached."""

    def __init__(self, battery_id: int = 0, base_path: PathLike = DEFAULT_BASE_PATH) -> None:
        self.id = battery_id
        self.base_path = Path(base_path)
        self._texts: dict[str, str] = {}
        self._energy_full = 0

    def __repr__(self) -> str:
        return f"Battery(id={self.id}, base_path={str(self.base_path)!r})"

    def _read_line(self, name: str) -> Optional[str]:
        if self.id < 0:
            return None
        try:
            with open(
                self.base_path / f"BAT{self.id}" / name,
                encoding="utf-8",
                errors="replace",
                newline="",
            ) as stream:
                return stream.readline().removesuffix("\n")
        except OSError:
            return None

    def _read_text(self, name: str) -> str:
        value = self._read_line(name)
        return UNKNOWN if value is None else value

    def _read_count(self, name: str) -> int:
        value = self._read_line(name)
        if value is None:
            return 0
        match = _LEADING_INT.match(value)
        return int(match.group(1)) if match else 0

    def _cached_text(self, name: str) -> str:
        value = self._texts.get(name, "")
        if not value:
            value = self._read_text(name)
            self._texts[name] = value
        return value

    def vendor(self) -> str:
        """Return the manufacturer."""
        return self._cached_text("manufacturer")

    def model(self) -> str:
        """Return the model name."""
        return self._cached_text("model_name")

    def serial_number(self) -> str:
        """Return the serial number."""
        return self._cached_text("serial_number")

    def technology(self) -> str:
        """Return the cell technology."""
        return self._cached_text("technology")

    def energy_full(self) -> int:
        """Return the energy when fully charged; 0 when unknown."""
        if self._energy_full == 0:
            self._energy_full = self._read_count("energy_full")
        return self._energy_full

    def energy_now(self) -> int:
        """Return the energy stored now; 0 when unknown."""
        return self._read_count("energy_now")

    def charging(self) -> bool:
        """Return whether the battery reports that it is charging."""
        return self._read_line("status") == "Charging"

    def discharging(self) -> bool:
        """Return whether the battery is not charging."""
        return not self.charging()

    def capacity(self) -> float:
        """Return the charge level as a fraction of full energy."""
        now = self.energy_now()
        full = self.energy_full()
        if full == 0:
            return math.nan if now == 0 else math.inf
        return now / full


def all_batteries(base_path: PathLike = DEFAULT_BASE_PATH) -> list[Battery]:
    """Return ``BAT0``, ``BAT1``, ... up to the first one that is missing."""
    batteries = []
    battery_id = 0
    while exists(Path(base_path) / f"BAT{battery_id}"):
        batteries.append(Battery(battery_id, base_path))
        battery_id += 1
    return batteries