[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sparsela"
version = "0.1.0"
description = "Sparse vectors, compressed sparse matrices, triplet assembly and traversal stacks in pure Python"
requires-python = ">=3.10"
keywords = ["sparse", "linear algebra", "csr", "csc", "sparse vector", "triplet"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sparsela"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
