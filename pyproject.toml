[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bgcheck"
version = "0.1.0"
description = "Bigraph terms, reaction rules and property queries for bigraphical model checking"
requires-python = ">=3.10"
dependencies = []
keywords = ["bigraph", "model checking", "reaction rules", "formal methods"]
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

[tool.hatch.build.targets.wheel]
packages = ["bgcheck"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
