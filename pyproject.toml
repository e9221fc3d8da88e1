[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cometa"
version = "0.1.0"
description = "A small game-engine core: layers and events, a sparse-set store, rigid-body physics with box and sphere collisions, and a ship-dodging game."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "game-engine",
    "physics",
    "collision-detection",
    "rigid-body",
    "event-bus",
    "sparse-set",
    "layers",
]
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
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cometa = "cometa.application:main"

[tool.hatch.build.targets.wheel]
packages = ["cometa"]

[tool.hatch.build.targets.sdist]
include = [
    "cometa",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
