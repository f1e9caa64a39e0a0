# hwreport

Hardware and system information for Linux, read from `/proc` and `/sys`.
No third-party dependencies.

## Command line

```
hwreport
```

The command prints, section by section, the CPU sockets (vendor, model,
core counts, clock speeds, cache sizes, per-thread frequency and load), the
operating system, graphics cards, memory, mainboard, batteries and disks.
Values that cannot be determined show as `<unknown>` or `-1`.

Per-thread load is measured over an interval, so the command waits about a
second before sampling.

Graphics card names come from a `pci.ids` database read from
`~/.hwinfo/pci.ids`. If that file cannot be opened, the command prints an
error to standard error and exits with status 1.

## Library use

```python
from hwreport.cpu import all_cpus
from hwreport.memory import Memory
from hwreport.disk import all_disks
from hwreport.battery import all_batteries
from hwreport.mainboard import read_mainboard
from hwreport.osinfo import read_os

for cpu in all_cpus():
    print(cpu.vendor, cpu.model_name, cpu.num_logical_cores)

memory = Memory()
print(memory.total_bytes(), memory.available_bytes())

for disk in all_disks():
    print(disk.model, disk.size_bytes)

for battery in all_batteries():
    print(battery.model(), battery.capacity(), battery.charging())

print(read_mainboard().vendor)
print(read_os().name)
```

`hwreport.pcimapper.default_mapper()` loads `~/.hwinfo/pci.ids` once. A
`PCIMapper` can also be built from any other copy of the file and passed to
`hwreport.gpu.all_gpus(drm_root, mapper)`.

Most readers take their file locations as arguments (`all_cpus`,
`all_batteries`, `all_disks`, `all_gpus`, `read_meminfo`, `read_os`,
`read_mainboard`), and the text parsers `parse_cpuinfo`, `parse_meminfo`
and `parse_os_release` work on strings, so a captured copy of a machine's
`/proc` and `/sys` can be read as well as the live system.
`hwreport.report.render_report` turns already gathered objects into the
text the command prints.

## Limitations

- Linux only; values come from procfs, sysfs and `os.uname`.
- Graphics cards get vendor, name and maximum GT frequency; driver
  version, memory size and core count stay empty or 0.
- Memory is shown as a single module whose vendor, model, name and serial
  number are `<unknown>`; per-DIMM details are not read.
- L1 and L2 cache sizes are not read and stay -1; the `cache size` field of
  `/proc/cpuinfo` is taken as the L3 size.
- Utilisation readings cover only one CPU socket.

## Tests

```
pip install -e .[test]
pytest
```