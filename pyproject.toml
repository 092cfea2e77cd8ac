[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sword"
version = "0.1.0"
description = "Create, play and solve word puzzle games such as Wordle"
requires-python = ">=3.10"
dependencies = []
keywords = ["wordle", "word game", "puzzle", "terminal game"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
sword = "sword.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sword"]

[tool.pytest.ini_options]
addopts = "-ra"
