[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "laberinto"
version = "0.1.0"
description = "Console maze game: guide an avatar across a board to the exit without falling into the abyss."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "maze", "console", "puzzle", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
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
laberinto = "laberinto.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["laberinto"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
