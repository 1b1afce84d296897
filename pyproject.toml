[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "dsakit"
version = "0.1.0"
description = "Classic data structures and graph algorithms with small interactive menu programs"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "algorithms",
    "binary-search-tree",
    "binary-tree",
    "heap",
    "hashing",
    "dijkstra",
    "prim",
    "optimal-bst",
    "adjacency-matrix",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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
dsakit-employees = "dsakit.employees:main"
dsakit-binary-tree = "dsakit.binary_tree:main"
dsakit-heap = "dsakit.heap:main"
dsakit-obst = "dsakit.obst:main"
dsakit-flights = "dsakit.flights:main"
dsakit-adjacency = "dsakit.adjacency:main"
dsakit-music-library = "dsakit.music_library:main"
dsakit-medical-records = "dsakit.medical_records:main"
dsakit-shortest-path = "dsakit.shortest_path:main"
dsakit-prims = "dsakit.prims:main"

[tool.setuptools.packages.find]
include = ["dsakit*"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
