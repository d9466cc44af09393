[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yearfill"
version = "0.1.0"
description = "Fill missing years in an internet-usage and population series with least-squares curve fits."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "regression",
    "polynomial",
    "exponential",
    "curve fitting",
    "interpolation",
    "time series",
    "csv",
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
yearfill = "yearfill.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["yearfill"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
