[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dirvis"
version = "0.1.0"
description = "Print a directory as a coloured tree in the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["tree", "directory", "filesystem", "terminal", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dirvis = "dirvis.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dirvis"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
