[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nonempty"
version = "0.11.0"
description = "Correct by construction non-empty list"
requires-python = ">=3.10"
dependencies = []
keywords = ["nonempty", "list", "collection", "data-structure"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nonempty"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
