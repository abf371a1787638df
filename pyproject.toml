[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bigarith"
version = "0.5.0"
description = "Number theory on arbitrary-precision integers: Montgomery modular exponentiation, extended GCD, modular inverses and probabilistic primality tests"
requires-python = ">=3.10"
dependencies = []
keywords = ["mathematics", "numerics", "bignum", "primality", "montgomery", "modular-arithmetic"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bigarith"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
