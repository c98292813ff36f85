[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "bevarmejo"
version = "24.10.0"
description = "Anytown water distribution system problem: formulations, cost tables, pump patterns and decision-variable bounds"
requires-python = ">=3.10"
dependencies = []
keywords = ["water distribution", "anytown", "optimisation", "hydraulics", "nsga2"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["bevarmejo*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
