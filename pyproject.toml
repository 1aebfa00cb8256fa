[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "enschin"
version = "0.1.0"
description = "Core pieces of a small 2D game engine: vector math, 4x4 matrices, camera, timers, models, terrain, sprites, chunks, resources and input mapping."
requires-python = ">=3.10"
keywords = ["game", "engine", "2d", "matrix", "camera", "chunks", "input", "sprites"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["enschin"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
