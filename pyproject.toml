[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fiocommon"
version = "0.1.0"
description = "Shared helpers for FIO protocol contracts: account names, base58 keys, validators, error results, time conversion and reward routing."
requires-python = ">=3.10"
dependencies = [
    "pycryptodome",
]
keywords = ["fio", "blockchain", "base58", "validation", "rewards"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Office/Business :: Financial",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["fiocommon"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
