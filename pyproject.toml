[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "airtraffic"
version = "0.1.0"
description = "A small terminal air traffic controller game"
requires-python = ">=3.10"
keywords = ["game", "air traffic control", "terminal", "curses", "simulation"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
airtraffic = "airtraffic.app:main"

[tool.hatch.build.targets.wheel]
packages = ["airtraffic"]

[tool.pytest.ini_options]
addopts = "-ra"
