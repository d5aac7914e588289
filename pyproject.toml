[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "skylineq"
version = "0.1.0"
description = "Skyline queries over two-attribute product datasets read from CSV files"
requires-python = ">=3.10"
dependencies = []
keywords = ["skyline", "pareto", "dominance", "query", "csv"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
skylineq = "skylineq.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["skylineq"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
