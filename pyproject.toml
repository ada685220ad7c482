[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rangekit"
version = "0.1.0"
description = "Range-query and tree data structures: Fenwick trees, segment trees, sparse tables, LCA and tree diameter."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "fenwick-tree",
    "binary-indexed-tree",
    "segment-tree",
    "lazy-propagation",
    "sparse-table",
    "range-minimum-query",
    "lowest-common-ancestor",
    "tree-diameter",
    "algorithms",
    "data-structures",
]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
rangekit-rmq = "rangekit.sparse_table:main"

[tool.hatch.build.targets.wheel]
packages = ["rangekit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
