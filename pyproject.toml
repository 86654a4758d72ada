[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "designpatterns"
version = "0.1.0"
description = "Small, runnable examples of creational and behavioural design patterns and SOLID principles"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "design patterns",
    "abstract factory",
    "builder",
    "factory method",
    "functional options",
    "object pool",
    "simple factory",
    "chain of responsibility",
    "template method",
    "timeout",
    "solid",
]
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
    "Topic :: Education",
    "Topic :: Software Development",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
designpatterns-context = "designpatterns.context_pattern:main"
designpatterns-lsp = "designpatterns.solid_lsp:main"
designpatterns-srp = "designpatterns.solid_srp:main"

[tool.hatch.build.targets.wheel]
packages = ["designpatterns"]

[tool.pytest.ini_options]
addopts = "-ra"
