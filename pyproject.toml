[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shiftword"
version = "0.1.0"
description = "Backtracking solvers for Wordle-style word patterns and worker shift scheduling"
requires-python = ">=3.10"
dependencies = []
keywords = ["wordle", "puzzle", "backtracking", "scheduling", "word-search"]
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
shiftword-wordle = "shiftword.wordle:main"
shiftword-schedule = "shiftword.schedwork:main"

[tool.hatch.build.targets.wheel]
packages = ["shiftword"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
