[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hexlayers"
version = "0.1.0"
description = "Layered hexagonal game maps built from simple shapes, with a terminal grid viewer"
requires-python = ">=3.10"
dependencies = []
keywords = ["hex", "hexagonal", "grid", "map", "game", "strategy", "shapes"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Turn Based Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hexlayers = "hexlayers.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hexlayers"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
