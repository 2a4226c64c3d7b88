[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "duckengine"
version = "0.1.0"
description = "A small 2D game engine runtime that loads folder-format games and runs their main loop"
requires-python = ">=3.11"
keywords = ["game", "engine", "2d", "runtime", "pygame"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: pygame",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
duckengine = "duckengine.engine:main"

[tool.hatch.build.targets.wheel]
packages = ["duckengine"]

[tool.pytest.ini_options]
addopts = "-ra"
