[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rushsolve"
version = "0.1.0"
description = "Sliding-block (Rush Hour style) puzzle solver with UCS, GBFS, A* and IDA* search"
requires-python = ">=3.10"
dependencies = []
keywords = ["rush hour", "puzzle", "solver", "a-star", "ida-star", "search"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rushsolve = "rushsolve.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rushsolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
