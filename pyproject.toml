[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "asastro"
version = "1.0.0"
description = "Interactive two-dimensional N-body simulation of the solar system"
requires-python = ">=3.10"
keywords = ["astronomy", "gravity", "n-body", "solar system", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Astronomy",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
asastro = "asastro.app:main"

[tool.hatch.build.targets.wheel]
packages = ["asastro"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
