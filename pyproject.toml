[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "reiterables"
version = "0.1.0"
description = "Re-iterable sources and lazy adapters that can be iterated over any number of times."
requires-python = ">=3.10"
dependencies = []
keywords = ["iterable", "iterator", "lazy", "adapters", "itertools"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["reiterables"]

[tool.pytest.ini_options]
addopts = "-ra"
