[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "editdist"
version = "0.1.0"
description = "Insert/delete edit distance between two texts, four ways, with a timing benchmark"
requires-python = ">=3.10"
dependencies = []
keywords = ["edit distance", "dynamic programming", "memoization", "benchmark", "strings"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
editdist = "editdist.cli:main"
editdist-bench = "editdist.benchmark:main"

[tool.hatch.build.targets.wheel]
packages = ["editdist"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
