[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "repeatprf"
version = "1.0.0"
description = "Generate DNA repeat profiles and compute statistics on sequencing traces"
requires-python = ">=3.10"
dependencies = []
keywords = ["bioinformatics", "profile", "repeat", "dna", "traces", "roc"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
genprf = "repeatprf.genprf:main"

[tool.hatch.build.targets.wheel]
packages = ["repeatprf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
