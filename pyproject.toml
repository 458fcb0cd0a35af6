[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "timeutils"
version = "1.0.0"
description = "Nanosecond-precision durations, monotonic sleeping and countdown timers"
requires-python = ">=3.10"
dependencies = []
keywords = ["time", "duration", "timer", "monotonic", "sleep"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["timeutils"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
