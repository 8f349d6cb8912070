[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pathweaver"
version = "0.1.0"
description = "Graph algorithms and route-planning heuristics: cycles, spanning trees, components, shortest paths, Hamiltonian cycles and gold-collecting tours."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "algorithms",
    "dijkstra",
    "kruskal",
    "kosaraju",
    "hamiltonian",
    "topological-sort",
    "genetic-algorithm",
    "2-opt",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pathweaver = "pathweaver.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pathweaver"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
