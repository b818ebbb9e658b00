[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cslib"
version = "0.1.0"
description = "Bounds-checked Vector, Stack and SortedSet collections and a configurable token scanner"
requires-python = ">=3.10"
dependencies = []
keywords = ["collections", "vector", "stack", "sorted set", "tokenizer", "scanner", "lexer"]
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["cslib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
