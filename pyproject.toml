[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "syslab"
version = "0.1.0"
description = "CPU and disk scheduling simulators and a two-pass SIC assembler"
requires-python = ">=3.10"
dependencies = []
keywords = ["scheduling", "fcfs", "sjf", "round-robin", "priority", "scan", "c-scan", "assembler", "sic"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
syslab-cpu = "syslab.cpu_scheduling:main"
syslab-disk = "syslab.disk_scheduling:main"
syslab-asm = "syslab.assembler:main"

[tool.hatch.build.targets.wheel]
packages = ["syslab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
