[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "katas"
version = "0.1.0"
description = "Small programming exercises: matrices, series, recursion, searching, sorting, dates and number puzzles."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "exercises",
    "katas",
    "recursion",
    "sorting",
    "searching",
    "mandelbrot",
    "matrix",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
katas-matrix = "katas.matrix:main"
katas-fractal = "katas.fractal:main"

[tool.hatch.build.targets.wheel]
packages = ["katas"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
