[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adventdays"
version = "0.1.0"
description = "Solvers for nine daily programming puzzles: list distances, report safety, memory scanning, word search, print queues, guard patrols, bridge equations, antennas and disk compaction."
requires-python = ">=3.10"
keywords = ["puzzles", "advent", "algorithms", "grid", "command-line"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
adventdays = "adventdays.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["adventdays"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
