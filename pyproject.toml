[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tx2acc"
version = "0.1.0"
description = "Replay a CSV of client transactions and report the resulting account balances"
requires-python = ">=3.10"
dependencies = []
keywords = ["transactions", "accounts", "ledger", "csv", "disputes", "chargeback"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Accounting",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tx2acc = "tx2acc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tx2acc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
