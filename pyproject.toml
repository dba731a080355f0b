[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "settleplan"
version = "0.1.0"
description = "Turn-based simulation of settlement development plans with facility selection policies"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "settlement", "planning", "facilities", "turn-based"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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
settleplan = "settleplan.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["settleplan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
