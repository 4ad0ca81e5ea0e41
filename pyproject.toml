[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "supplyplanner"
version = "0.1.0"
description = "Find where to stockpile emergency supplies so every city in a road network is covered, with a map file parser and small console tools."
requires-python = ">=3.10"
dependencies = []
keywords = ["dominating set", "backtracking", "recursion", "graphs", "disaster planning"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
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
supplyplanner = "supplyplanner.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["supplyplanner"]

[tool.pytest.ini_options]
addopts = "-ra"
