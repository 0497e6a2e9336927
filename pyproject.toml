[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ridebooking"
version = "0.1.0"
description = "Ride booking domain: pricing rules for trips, riders and rides behind pluggable gateways"
requires-python = ">=3.10"
dependencies = []
keywords = ["ride", "booking", "pricing", "domain-driven-design", "hexagonal"]
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
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ridebooking"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
