"""Hardware and system information gathered from Linux procfs and sysfs."""

__version__ = "0.1.0"