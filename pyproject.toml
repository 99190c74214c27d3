[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hllcompare"
version = "0.1.0"
description = "HyperLogLog cardinality estimation with multiply-shift universal hashing, plus accuracy and speed benchmarks"
requires-python = ">=3.10"
dependencies = []
keywords = ["hyperloglog", "cardinality", "sketch", "probabilistic", "universal-hashing", "benchmark"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
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
hllcompare = "hllcompare.benchmark:main"

[tool.hatch.build.targets.wheel]
packages = ["hllcompare"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
