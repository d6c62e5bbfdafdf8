[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "megaengine"
version = "0.1.0"
description = "A small 2D game engine with scenes, layers, game objects, components and sprite-sheet animation, drawn with pygame."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game engine", "2d", "pygame", "sprites", "animation", "scenes", "components"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["megaengine"]

[tool.hatch.build.targets.sdist]
include = ["megaengine", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
