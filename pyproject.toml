[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gbcemu"
version = "0.1.0"
description = "An early-stage Game Boy Color emulator core: opcode decoding, a memory map and a CPU"
requires-python = ">=3.10"
dependencies = []
keywords = ["gameboy", "gbc", "emulator", "cpu"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gbcemu = "gbcemu.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gbcemu"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
