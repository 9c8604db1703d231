[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stringsorts"
version = "0.1.0"
description = "Benchmark of string sorting algorithms that counts character comparisons"
requires-python = ">=3.10"
dependencies = []
keywords = ["sorting", "benchmark", "radix sort", "merge sort", "quicksort", "strings"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
stringsorts = "stringsorts.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["stringsorts"]

[tool.pytest.ini_options]
addopts = "-ra"
