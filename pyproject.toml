[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quantasim"
version = "0.1.0"
description = "Toy simulation of nuclear decay and photon/electron interactions"
requires-python = ">=3.10"
dependencies = []
keywords = ["physics", "nuclear", "decay", "photon", "electron", "compton", "pair production", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
quantasim = "quantasim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["quantasim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
