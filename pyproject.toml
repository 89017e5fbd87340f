[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "heaplayers"
version = "0.1.0"
description = "Building blocks for memory-allocator experiments: size-class bins, intrusive lists, a simulated heap, region layers and small utilities."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "memory allocator",
    "heap",
    "size classes",
    "regions",
    "reap",
    "obstack",
    "simulation",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
heaplayers-threads = "heaplayers.threads:main"

[tool.hatch.build.targets.wheel]
packages = ["heaplayers"]

[tool.hatch.build.targets.sdist]
include = ["heaplayers", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
