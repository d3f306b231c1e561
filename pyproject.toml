[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "asciigolf"
version = "1.0.0"
description = "A small terminal golf game drawn in ASCII art"
requires-python = ">=3.10"
dependencies = []
keywords = ["golf", "ascii", "terminal", "game", "physics"]
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
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
asciigolf = "asciigolf.game:main"

[tool.hatch.build.targets.wheel]
packages = ["asciigolf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
