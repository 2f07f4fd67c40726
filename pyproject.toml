[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termgames"
version = "0.1.0"
description = "Three small terminal games: a dice duel, guess the number, and rock-paper-scissors"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "terminal", "curses", "dice", "rock-paper-scissors", "guess-the-number"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dice-game = "termgames.dice:main"
guess-a-number = "termgames.guess:main"
rock-paper-scissors = "termgames.rps:main"

[tool.hatch.build.targets.wheel]
packages = ["termgames"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
