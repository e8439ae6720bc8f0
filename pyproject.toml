[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "dsbasics"
version = "0.1.0"
description = "Basic data structures and algorithms: binary-heap priority queue, open-addressing hash table, red-black tree map and in-place sorts"
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "algorithms", "heap", "priority queue", "hash table", "red-black tree", "quicksort"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["dsbasics*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
