[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "reflex"
version = "0.1.0"
description = "Small utilities: a falsy none marker, argument packs with type-based selection, named argument bundles, type registries and prefix permutations."
requires-python = ">=3.10"
dependencies = []
keywords = ["sentinel", "argument-pack", "kwargs", "registry", "permutations", "utilities"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["reflex"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
