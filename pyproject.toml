[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphsolvers"
version = "0.1.0"
description = "Random planar point sets, complete Euclidean graphs, a pluggable edge solver and SVG rendering with Delaunay triangulation."
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "euclidean", "delaunay", "svg", "subsets", "optimization"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
graphsolvers = "graphsolvers.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["graphsolvers"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
