[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tritongraph"
version = "0.1.0"
description = "In-memory property graph primitives: typed nodes, relationships, property storage and JSON output"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "database", "property-graph", "nodes", "relationships", "json"]
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
    "Topic :: Database :: Database Engines/Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tritongraph"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
