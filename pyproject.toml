[build-system]
requires = ["hatchling>=1.18"]
build-backend = "hatchling.build"

[project]
name = "numethods"
version = "0.1.0"
description = "Classic numerical methods: linear systems, root finding, curve fitting, interpolation and integration"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "numerical-methods",
    "gauss-elimination",
    "gauss-jordan",
    "gauss-seidel",
    "gauss-jacobi",
    "bisection",
    "newton-raphson",
    "interpolation",
    "curve-fitting",
    "numerical-integration",
]
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
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest>=7"]

[project.scripts]
numethods = "numethods.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["numethods"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
