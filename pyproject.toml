[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zastavky"
version = "0.1.0"
description = "Console bus stop browser with small data structures: sequences, lists, stacks, queues, networks and shell sort"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "bus stops",
    "transit",
    "data structures",
    "linked list",
    "shell sort",
    "hierarchy",
    "network",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
zastavky = "zastavky.manager:main"

[tool.hatch.build.targets.wheel]
packages = ["zastavky"]

[tool.hatch.build.targets.sdist]
include = ["zastavky", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
