[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rcdrive"
version = "0.1.0"
description = "VESC UART and SBUS receiver protocols for radio-controlled drive systems"
requires-python = ">=3.10"
keywords = ["vesc", "sbus", "uart", "motor-controller", "rc", "serial", "crc16"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
    "Topic :: Terminals :: Serial",
]
dependencies = [
    "pyserial",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
rcdrive = "rcdrive.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rcdrive"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
