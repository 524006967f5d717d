[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "linkcross"
version = "1.0.0"
description = "Linked-Crossing Challenge: an arena of splitting particles and snake-like faiseurs, with a chain of articulations, shown in a Tk window"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "simulation", "arena", "particles", "chain", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
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
linkcross = "linkcross.gui:main"

[tool.setuptools.packages.find]
include = ["linkcross*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
