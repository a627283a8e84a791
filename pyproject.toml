[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mqperfkit"
version = "0.1.0"
description = "Support utilities for a messaging performance harness: configuration lists, locks, string building, blank-padded fields and message payload helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["performance", "benchmark", "messaging", "rfh2", "configuration"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mqperfkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
