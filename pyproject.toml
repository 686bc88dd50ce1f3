[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordcross"
version = "0.1.0"
description = "A terminal crossword puzzle game with a word-and-hint list, timed play and a score card"
requires-python = ">=3.10"
dependencies = []
keywords = ["crossword", "puzzle", "game", "terminal", "trie"]
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
wordcross = "wordcross.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wordcross"]

[tool.pytest.ini_options]
addopts = "-ra"
