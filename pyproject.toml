[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eccfield"
version = "0.1.0"
description = "Prime-field and Montgomery arithmetic, elliptic curve point operations and SHA-1/SHA-2 hashing in pure Python"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "elliptic curve",
    "ecc",
    "montgomery",
    "finite field",
    "jacobian coordinates",
    "sha1",
    "sha224",
    "sha256",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["eccfield"]

[tool.hatch.build.targets.sdist]
include = ["eccfield", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
