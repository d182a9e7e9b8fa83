[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aocdays"
version = "0.1.0"
description = "Solvers for grid, graph and geometry puzzles: beam tracing, crucible paths, lagoon areas, workflows, pulse networks, gardens, bricks, hiking trails, hailstones and graph cuts."
requires-python = ">=3.10"
keywords = ["puzzles", "grid", "graph", "dijkstra", "min-cut", "shoelace", "stoer-wagner"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
aocday16 = "aocdays.day16:main"
aocday17 = "aocdays.day17:main"
aocday18 = "aocdays.day18:main"
aocday19 = "aocdays.day19:main"
aocday20 = "aocdays.day20:main"
aocday21 = "aocdays.day21:main"
aocday22 = "aocdays.day22:main"
aocday23 = "aocdays.day23:main"
aocday24 = "aocdays.day24:main"
aocday25 = "aocdays.day25:main"

[tool.hatch.build.targets.wheel]
packages = ["aocdays"]

[tool.pytest.ini_options]
addopts = "-ra"
