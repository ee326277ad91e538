[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graaf"
version = "0.1.0"
description = "Directed and undirected graphs with shortest path, spanning tree, clique, cycle and ordering algorithms, and DOT export."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "graph-algorithms",
    "shortest-path",
    "minimum-spanning-tree",
    "clique",
    "topological-sort",
    "dot",
]
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
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["graaf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
