[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "diceforge"
version = "1.0.0"
description = "Pseudo-random number generators and Gauss-Legendre integration helpers in pure Python."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "random",
    "prng",
    "mersenne-twister",
    "xorshift",
    "lfsr",
    "blum-blum-shub",
    "naor-reingold",
    "quadrature",
    "integration",
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
packages = ["diceforge"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
