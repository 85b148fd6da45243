[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arcadebox"
version = "1.0.0"
description = "A coin-operated terminal arcade with Hangman, Tic-Tac-Toe, Minesweeper and Connect 4"
requires-python = ">=3.10"
dependencies = []
keywords = ["arcade", "games", "terminal", "hangman", "minesweeper", "connect4", "tictactoe"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
arcadebox = "arcadebox.arcade:main"
arcadebox-hangman = "arcadebox.hangman:main"
arcadebox-tictactoe = "arcadebox.tictactoe:main"
arcadebox-minesweeper = "arcadebox.minesweeper:main"
arcadebox-connect4 = "arcadebox.connect4:main"

[tool.hatch.build.targets.wheel]
packages = ["arcadebox"]

[tool.hatch.build.targets.sdist]
include = ["arcadebox", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
