[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arboreto"
version = "0.1.0"
description = "Teaching implementations of a max-heap, a binary search tree and an AVL tree, with small console demos"
requires-python = ">=3.10"
dependencies = []
keywords = ["heap", "heapsort", "binary search tree", "avl", "data structures", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
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
arboreto-heap = "arboreto.maxheap_cli:main"
arboreto-bst = "arboreto.bst_cli:main"
arboreto-avl = "arboreto.avl_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["arboreto"]

[tool.pytest.ini_options]
addopts = "-ra"
