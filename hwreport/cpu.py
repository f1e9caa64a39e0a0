"""CPU sockets described by ``/proc/cpuinfo``, with live clock and load readings."""

from __future__ import annotations

import os
import re
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from .filesystem import Jiffies, read_int, read_jiffies
from .stringutils import split, split_terminated, strip

PathLike = Union[str, "os.PathLike[str]"]

DEFAULT_SYSFS_ROOT = "/sys/devices/system/cpu"
DEFAULT_CPUINFO_PATH = "/proc/cpuinfo"
DEFAULT_STAT_PATH = "/proc/stat"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _to_int(text: str) -> int:
    """Parse the integer at the start of ``text``; raise ValueError if there is none."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    return int(match.group(1))


def _div_1000(value: int) -> int:
    """Divide by 1000, truncating toward zero."""
    return value // 1000 if value >= 0 else -(-value // 1000)


def _cpufreq_file(core_id: int, sysfs_root: PathLike, name: str) -> Path:
    return Path(sysfs_root) / f"cpu{core_id}" / "cpufreq" / name


def _read_mhz(core_id: int, sysfs_root: PathLike, name: str) -> int:
    value = read_int(_cpufreq_file(core_id, sysfs_root, name))
    if value > -1:
        return _div_1000(value)
    return -1


def max_clock_speed_mhz(core_id: int, sysfs_root: PathLike = DEFAULT_SYSFS_ROOT) -> int:
    """Return the maximum scaling frequency of ``core_id`` in MHz, or -1."""
    return _read_mhz(core_id, sysfs_root, "scaling_max_freq")


def regular_clock_speed_mhz(core_id: int, sysfs_root: PathLike = DEFAULT_SYSFS_ROOT) -> int:
    """Return the base frequency of ``core_id`` in MHz, or -1."""
    return _read_mhz(core_id, sysfs_root, "base_frequency")


def min_clock_speed_mhz(core_id: int, sysfs_root: PathLike = DEFAULT_SYSFS_ROOT) -> int:
    """Return the minimum scaling frequency of ``core_id`` in MHz, or -1."""
    return _read_mhz(core_id, sysfs_root, "scaling_min_freq")


def _load_ratio(current: Jiffies, last: Jiffies) -> Optional[float]:
    total = current.all - last.all
    work = current.working - last.working
    if total == 0:
        return None
    return work / total


@dataclass
class CPU:
    """One CPU socket and its static properties."""

    id: int = -1
    model_name: str = ""
    vendor: str = ""
    num_physical_cores: int = -1
    num_logical_cores: int = -1
    max_clock_speed_mhz: int = -1
    regular_clock_speed_mhz: int = -1
    l1_cache_size_bytes: int = -1
    l2_cache_size_bytes: int = -1
    l3_cache_size_bytes: int = -1
    flags: list[str] = field(default_factory=list)
    sysfs_root: PathLike = field(default=DEFAULT_SYSFS_ROOT, repr=False, compare=False)
    stat_path: PathLike = field(default=DEFAULT_STAT_PATH, repr=False, compare=False)
    warmup_seconds: float = field(default=1.0, repr=False, compare=False)
    _jiffies_ready: bool = field(default=False, init=False, repr=False, compare=False)
    _last_total: Jiffies = field(default_factory=Jiffies, init=False, repr=False, compare=False)
    _last_threads: dict[int, Jiffies] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def _init_jiffies(self) -> None:
        # The first reading needs a prior sample to form a delta against.
        if not self._jiffies_ready:
            time.sleep(self.warmup_seconds)
            self._jiffies_ready = True

    def current_clock_speed_mhz(self) -> list[int]:
        """Return the current frequency of every logical core in MHz."""
        speeds = []
        core_id = 0
        while True:
            value = read_int(_cpufreq_file(core_id, self.sysfs_root, "scaling_cur_freq"))
            if value == -1:
                break
            speeds.append(_div_1000(value))
            core_id += 1
        return speeds

    def current_utilisation(self) -> float:
        """Return the load since the previous call as a fraction, or -1.0."""
        self._init_jiffies()
        current = read_jiffies(0, self.stat_path)
        ratio = _load_ratio(current, self._last_total)
        self._last_total = current
        if ratio is None or not 0 <= ratio <= 1:
            return -1.0
        return ratio

    def thread_utilisation(self, thread_index: int) -> float:
        """Return the load of one logical core since its previous reading, or -1.0."""
        self._init_jiffies()
        current = read_jiffies(thread_index + 1, self.stat_path)
        ratio = _load_ratio(current, self._last_threads.get(thread_index, Jiffies()))
        self._last_threads[thread_index] = current
        if ratio is None or not 0 <= ratio <= 100:
            return -1.0
        return ratio

    def threads_utilisation(self) -> list[float]:
        """Return the load of every logical core."""
        return [self.thread_utilisation(index) for index in range(self.num_logical_cores)]


def parse_cpuinfo(text: str, sysfs_root: PathLike = DEFAULT_SYSFS_ROOT) -> list[CPU]:
    """Build one CPU per physical socket from the text of ``/proc/cpuinfo``."""
    cpus: list[CPU] = []
    physical_id = -1
    for block in split(text, "\n\n"):
        cpu = CPU(sysfs_root=sysfs_root)
        add = False
        for line in split_terminated(block, "\n"):
            pairs = split(line, ":")
            if len(pairs) < 2:
                continue
            name, value = strip(pairs[0]), strip(pairs[1])
            if name == "vendor_id":
                cpu.vendor = value
            elif name == "model name":
                cpu.model_name = value
            elif name == "cache size":
                cpu.l3_cache_size_bytes = _to_int(split(value, " ")[0]) * 1024
            elif name == "siblings":
                cpu.num_logical_cores = _to_int(value)
            elif name == "cpu cores":
                cpu.num_physical_cores = _to_int(value)
            elif name == "flags":
                cpu.flags = split(value, " ")
            elif name == "physical id":
                socket = _to_int(value)
                if socket != physical_id:
                    cpu.id = socket
                    add = True
        if add:
            cpu.max_clock_speed_mhz = max_clock_speed_mhz(cpu.id, sysfs_root)
            cpu.regular_clock_speed_mhz = regular_clock_speed_mhz(cpu.id, sysfs_root)
            physical_id += 1
            cpus.append(cpu)
    return cpus


def all_cpus(
    cpuinfo_path: PathLike = DEFAULT_CPUINFO_PATH,
    sysfs_root: PathLike = DEFAULT_SYSFS_ROOT,
) -> list[CPU]:
    """Return every CPU socket, or [] when ``cpuinfo_path`` cannot be read."""
    try:
        text = Path(cpuinfo_path).read_text(encoding="utf-8", errors="replace")
    except OSError:
        return []
    return parse_cpuinfo(text, sysfs_root)