[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wowlib"
version = "0.1.0"
description = "Range-maximum combiners for segment-tree nodes, plus small attribute filters and distance/id records"
requires-python = ">=3.10"
dependencies = []
keywords = ["segment tree", "combiner", "range maximum", "filter", "data structures"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wowlib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
