[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flightdesk"
version = "0.1.0"
description = "Queries and a curses menu over a catalogue of users, flights, reservations, hotels and airports"
requires-python = ">=3.10"
dependencies = []
keywords = ["flights", "reservations", "hotels", "airports", "queries", "catalog", "curses"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Front-Ends",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["flightdesk"]

[tool.hatch.build.targets.sdist]
include = ["flightdesk", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
