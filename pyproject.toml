[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algostudy"
version = "0.1.0"
description = "Small, readable implementations of classic algorithms and data structures for study"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data structures",
    "sorting",
    "binary search",
    "fibonacci",
    "hashing",
    "rabin-karp",
    "graph traversal",
    "heap",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algostudy-search = "algostudy.search:main"
algostudy-fibonacci = "algostudy.fibonacci:main"
algostudy-sort = "algostudy.sorting:main"
algostudy-hash = "algostudy.hashing:main"
algostudy-graph = "algostudy.graph:main"
algostudy-dynarray = "algostudy.dynarray:main"
algostudy-pyramid = "algostudy.pyramid:main"

[tool.hatch.build.targets.wheel]
packages = ["algostudy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
