[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hanoitower"
version = "1.0.0"
description = "Terminal Tower of Hanoi game with a saved history of finished matches"
requires-python = ">=3.10"
dependencies = []
keywords = ["hanoi", "puzzle", "game", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
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
hanoitower = "hanoitower.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hanoitower"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
