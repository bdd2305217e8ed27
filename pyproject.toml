[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "limbint"
version = "0.1.0"
description = "Arbitrary-precision signed integers stored as base 2**32 limbs, with modular arithmetic helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["bignum", "arbitrary precision", "integer", "modular arithmetic", "limbs"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
limbint-demo = "limbint.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["limbint"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
