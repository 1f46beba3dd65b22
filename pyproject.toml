[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "robarm"
version = "0.61.0"
description = "Motion control for a three-axis desktop robot arm: G-code parsing, inverse kinematics, interpolated moves and simulated stepper hardware."
requires-python = ">=3.10"
dependencies = []
keywords = ["robot arm", "g-code", "inverse kinematics", "stepper", "ramps", "interpolation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["robarm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
