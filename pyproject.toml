[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "absolution"
version = "0.1.0"
description = "A small turn-based strategy game played from a terminal command prompt"
requires-python = ">=3.10"
dependencies = [
    "blessed",
]
keywords = ["game", "strategy", "turn-based", "terminal", "tui"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Turn Based Strategy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
absolution = "absolution.game:main"

[tool.hatch.build.targets.wheel]
packages = ["absolution"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
