[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rubikcube"
version = "0.1.0"
description = "A 3x3 Rubik's cube model with row and column turns and a coloured terminal view"
requires-python = ">=3.10"
keywords = ["rubik", "cube", "puzzle", "terminal", "ansi"]
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
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rubikcube = "rubikcube.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rubikcube"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
