[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tetrimino"
version = "0.1.0"
description = "A small falling-block puzzle engine: board, pieces and game rules."
requires-python = ">=3.10"
dependencies = []
keywords = ["tetromino", "puzzle", "game", "falling blocks"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tetrimino"]

[tool.pytest.ini_options]
addopts = "-ra"
