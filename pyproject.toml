[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algokit"
version = "0.1.0"
description = "Classic data structures and algorithms: lists, stacks, queues, trees, heaps, graphs, searching and sorting"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "linked-list",
    "binary-search-tree",
    "heap",
    "graph",
    "sorting",
    "searching",
    "dijkstra",
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
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algokit-recursion = "algokit.recursion:main"
algokit-value-list = "algokit.value_list:main"
algokit-search = "algokit.searching:main"
algokit-sort = "algokit.sorting:main"
algokit-linked-list = "algokit.linked_list:main"
algokit-queue = "algokit.linked_queue:main"
algokit-stack = "algokit.linked_stack:main"
algokit-dll = "algokit.dll_cli:main"
algokit-bst = "algokit.bst:main"
algokit-heap = "algokit.heap:main"
algokit-graph = "algokit.graph_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["algokit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
