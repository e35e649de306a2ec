[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aoc23"
version = "0.1.0"
description = "Solutions to the 2023 Advent of Code puzzles, one command per day."
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "aoc", "2023"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
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
aoc23-p00 = "aoc23.days.p00:main"
aoc23-p01 = "aoc23.days.p01:main"
aoc23-p02 = "aoc23.days.p02:main"
aoc23-p03 = "aoc23.days.p03:main"
aoc23-p04 = "aoc23.days.p04:main"
aoc23-p05 = "aoc23.days.p05:main"
aoc23-p06 = "aoc23.days.p06:main"
aoc23-p07 = "aoc23.days.p07:main"
aoc23-p08 = "aoc23.days.p08:main"
aoc23-p09 = "aoc23.days.p09:main"
aoc23-p10 = "aoc23.days.p10:main"
aoc23-p11 = "aoc23.days.p11:main"
aoc23-p12 = "aoc23.days.p12:main"
aoc23-p13 = "aoc23.days.p13:main"
aoc23-p14 = "aoc23.days.p14:main"
aoc23-p15 = "aoc23.days.p15:main"
aoc23-p16 = "aoc23.days.p16:main"
aoc23-p17 = "aoc23.days.p17:main"
aoc23-p18 = "aoc23.days.p18:main"
aoc23-p19 = "aoc23.days.p19:main"
aoc23-p20 = "aoc23.days.p20:main"
aoc23-p21 = "aoc23.days.p21:main"
aoc23-p22 = "aoc23.days.p22:main"
aoc23-p23 = "aoc23.days.p23:main"
aoc23-p24 = "aoc23.days.p24:main"
aoc23-p25 = "aoc23.days.p25:main"

[tool.hatch.build.targets.wheel]
packages = ["aoc23"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
