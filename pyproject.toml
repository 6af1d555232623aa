[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "advent24"
version = "0.1.0"
description = "Solvers for the first eleven days of a 2024 advent-style programming puzzle calendar"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "algorithms", "grid", "solver"]
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

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
advent24-day01 = "advent24.day01:main"
advent24-day02 = "advent24.day02:main"
advent24-day03 = "advent24.day03:main"
advent24-day04 = "advent24.day04:main"
advent24-day05 = "advent24.day05:main"
advent24-day06 = "advent24.day06:main"
advent24-day07 = "advent24.day07:main"
advent24-day08 = "advent24.day08:main"
advent24-day09 = "advent24.day09:main"
advent24-day10 = "advent24.day10:main"
advent24-day11 = "advent24.day11:main"

[tool.hatch.build.targets.wheel]
packages = ["advent24"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
