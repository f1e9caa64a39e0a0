[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hwreport"
version = "0.1.0"
description = "Gather hardware and system information (CPU, GPU, memory, disks, batteries, mainboard, OS) on Linux"
requires-python = ">=3.10"
dependencies = []
keywords = ["hardware", "system information", "cpu", "gpu", "sysfs", "procfs", "pci"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Hardware",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hwreport = "hwreport.report:main"

[tool.hatch.build.targets.wheel]
packages = ["hwreport"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
