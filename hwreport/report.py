"""Plain-text hardware report covering CPU, OS, GPU, RAM, main board, batteries and disks."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Optional, Sequence

from .battery import Battery, all_batteries
from .cpu import CPU, all_cpus
from .disk import Disk, all_disks
from .gpu import GPU, all_gpus
from .mainboard import MainBoard, read_mainboard
from .memory import Memory
from .osinfo import OSInfo, read_os
from .stringutils import get_value

_LABEL_WIDTH = 20
_MIB = 1024 * 1024

_CPU_HEADER = "----------------------------------- CPU -----------------------------------"
_OS_HEADER = "----------------------------------- OS ------------------------------------"
_GPU_HEADER = "----------------------------------- GPU -----------------------------------"
_RAM_HEADER = "----------------------------------- RAM -----------------------------------"
_BOARD_HEADER = "------------------------------- Main Board --------------------------------"
_BATTERY_HEADER = "------------------------------- Batteries ---------------------------------"
_DISK_HEADER = "--------------------------------- Disks -----------------------------------"
_RULE = "---------------------------------------------------------------------------"


def _field(label: str, value: object) -> str:
    return f"{label:<{_LABEL_WIDTH}}{value}"


def _number(value: float) -> str:
    """Format a floating-point value with six significant digits."""
    return f"{value:g}"


def _trunc_div(value: int, divisor: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(value) // divisor
    return quotient if value >= 0 else -quotient


def _cpu_lines(cpus: Iterable[CPU]) -> list[str]:
    lines = [_CPU_HEADER]
    for cpu in cpus:
        lines += [
            f"Socket {cpu.id}:",
            _field(" vendor:", cpu.vendor),
            _field(" model:", cpu.model_name),
            _field(" physical cores:", cpu.num_physical_cores),
            _field(" logical cores:", cpu.num_logical_cores),
            _field(" max frequency:", cpu.max_clock_speed_mhz),
            _field(" regular frequency:", cpu.regular_clock_speed_mhz),
            _field(
                " cache size (L1, L2, L3): ",
                f"{cpu.l1_cache_size_bytes}, {cpu.l2_cache_size_bytes}, {cpu.l3_cache_size_bytes}",
            ),
        ]
        utilisation = cpu.threads_utilisation()
        speeds = cpu.current_clock_speed_mhz()
        for thread_id, load in enumerate(utilisation):
            speed = get_value(speeds, thread_id, -1)
            lines.append(
                _field(f"   Thread {thread_id}: ", f"{speed} MHz ({_number(load * 100)}%)")
            )
    return lines


def _os_lines(os_info: OSInfo) -> list[str]:
    return [
        _OS_HEADER,
        _field("Operating System:", os_info.name),
        _field("version:", os_info.version),
        _field("kernel:", os_info.kernel),
        _field("architecture:", "32 bit" if os_info.is_32bit else "64 bit"),
        _field("endianess:", "little endian" if os_info.is_little_endian else "big endian"),
    ]


def _gpu_lines(gpus: Iterable[GPU]) -> list[str]:
    lines = [_GPU_HEADER]
    for gpu in gpus:
        lines += [
            f"GPU {gpu.id}:",
            _field("  vendor:", gpu.vendor),
            _field("  model:", gpu.name),
            _field("  driverVersion:", gpu.driver_version),
            _field("  memory [MiB]:", _number(gpu.memory_bytes / 1024.0 / 1024.0)),
            _field("  frequency:", gpu.frequency_mhz),
            _field("  cores:", gpu.num_cores),
        ]
    return lines


def _memory_lines(memory: Memory) -> list[str]:
    lines = [
        _RAM_HEADER,
        _field("size [MiB]:", _trunc_div(memory.total_bytes(), _MIB)),
        _field("free [MiB]:", _trunc_div(memory.free_bytes(), _MIB)),
        _field("available [MiB]:", _trunc_div(memory.available_bytes(), _MIB)),
    ]
    for module in memory.modules:
        lines += [
            f"RAM {module.id}:",
            _field("  vendor:", module.vendor),
            _field("  model:", module.model),
            _field("  name:", module.name),
            _field("  serial-number:", module.serial_number),
            _field("  Frequency [MHz]:", _trunc_div(module.frequency_hz, 1000 * 1000)),
        ]
    return lines


def _mainboard_lines(mainboard: MainBoard) -> list[str]:
    return [
        _BOARD_HEADER,
        _field("vendor:", mainboard.vendor),
        _field("name:", mainboard.name),
        _field("version:", mainboard.version),
        _field("serial-number:", mainboard.serial_number),
    ]


def _battery_lines(batteries: Sequence[Battery]) -> list[str]:
    lines = [_BATTERY_HEADER]
    if not batteries:
        lines.append("No Batteries installed or detected")
        return lines
    for counter, battery in enumerate(batteries):
        lines += [
            f"Battery {counter}:",
            _field("  vendor:", battery.vendor()),
            _field("  model:", battery.model()),
            _field("  serial-number:", battery.serial_number()),
            _field("  charging:", "yes" if battery.charging() else "no"),
            _field("  capacity:", _number(battery.capacity())),
        ]
    lines.append(_RULE)
    return lines


def _disk_lines(disks: Sequence[Disk]) -> list[str]:
    lines = [_DISK_HEADER]
    if not disks:
        lines.append("No Disks installed or detected")
        return lines
    for counter, disk in enumerate(disks):
        lines += [
            f"Disk {counter}:",
            _field("  vendor:", disk.vendor),
            _field("  model:", disk.model),
            _field("  serial-number:", disk.serial_number),
            _field("  size:", disk.size_bytes),
        ]
    lines.append(_RULE)
    return lines


def render_report(
    cpus: Iterable[CPU],
    os_info: OSInfo,
    gpus: Iterable[GPU],
    memory: Memory,
    mainboard: MainBoard,
    batteries: Sequence[Battery],
    disks: Sequence[Disk],
) -> str:
    """Render the hardware report as text, one line per field."""
    lines = ["Hardware Report:", ""]
    lines += _cpu_lines(cpus)
    lines += _os_lines(os_info)
    lines += _gpu_lines(gpus)
    lines += _memory_lines(memory)
    lines += _mainboard_lines(mainboard)
    lines += _battery_lines(list(batteries))
    lines += _disk_lines(list(disks))
    return "\n".join(lines) + "\n"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Gather information about this machine and print the report."""
    parser = argparse.ArgumentParser(
        prog="hwreport",
        description="Print a report of the hardware and operating system of this machine.",
    )
    parser.parse_args(argv)
    try:
        gpus = all_gpus()
        report = render_report(
            all_cpus(),
            read_os(),
            gpus,
            Memory(),
            read_mainboard(),
            all_batteries(),
            all_disks(),
        )
    except OSError as error:
        print(f"hwreport: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())