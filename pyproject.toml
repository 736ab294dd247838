[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linsolve"
version = "0.1.0"
description = "Solve systems of linear equations by Gauss, Gauss-Jordan, Cramer, inverse matrix or least squares, with a step-by-step trace"
requires-python = ">=3.10"
dependencies = []
keywords = ["linear algebra", "linear equations", "gauss", "cramer", "least squares", "matrix"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
linsolve = "linsolve.app:main"

[tool.hatch.build.targets.wheel]
packages = ["linsolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
