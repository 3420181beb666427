[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blockfall"
version = "0.1.0"
description = "A falling-block puzzle game on a 10 by 20 grid, drawn with pygame."
requires-python = ">=3.10"
keywords = ["game", "puzzle", "tetromino", "pygame", "falling blocks"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
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
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
blockfall = "blockfall.main:main"

[tool.hatch.build.targets.wheel]
packages = ["blockfall"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
