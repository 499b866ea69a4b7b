[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tetrion"
version = "0.1.0"
description = "Falling-block puzzle engine: seven-bag generation, Super Rotation System, lock-down rules, line clears and level goals."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "tetrimino",
    "puzzle",
    "game",
    "super-rotation-system",
    "seven-bag",
    "game-engine",
]
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
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tetrion"]

[tool.hatch.build.targets.sdist]
include = ["tetrion", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
