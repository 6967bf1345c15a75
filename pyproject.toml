[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oddments"
version = "0.1.0"
description = "Lazy iterator helpers and a min-max binary heap"
requires-python = ">=3.10"
dependencies = []
keywords = ["iterators", "itertools", "lazy", "heap", "priority-queue", "min-max-heap"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["oddments"]

[tool.pytest.ini_options]
addopts = "-ra"
