[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algobox"
version = "0.1.0"
description = "A collection of classic algorithms, data structures and small terminal games"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "sorting",
    "searching",
    "graphs",
    "avl-tree",
    "treap",
    "sudoku",
    "wordle",
    "games",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algobox-search = "algobox.searching:main"
algobox-sort = "algobox.sorting:main"
algobox-sudoku = "algobox.sudoku:main"
algobox-stack = "algobox.linked:main"
algobox-tictactoe = "algobox.tictactoe:main"
algobox-match3 = "algobox.match3:main"
algobox-guess = "algobox.guessing:main"
algobox-wordle = "algobox.wordle:main"

[tool.hatch.build.targets.wheel]
packages = ["algobox"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
