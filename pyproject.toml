[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tork"
version = "0.1.0"
description = "Data model, in-process locking, wildcard matching and middleware chains for a distributed task workflow engine"
requires-python = ">=3.10"
dependencies = []
keywords = ["workflow", "jobs", "tasks", "middleware", "locking", "wildcard"]
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
    "Topic :: System :: Distributed Computing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tork"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
