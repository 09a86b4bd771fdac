[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "holdemsim"
version = "0.1.0"
description = "Texas Hold'em table simulator with random-acting players, hand evaluation and ASCII card rendering"
requires-python = ">=3.10"
dependencies = []
keywords = ["poker", "texas-holdem", "cards", "simulation", "hand-evaluator"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
holdemsim = "holdemsim.game:main"

[tool.hatch.build.targets.wheel]
packages = ["holdemsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
