[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "swarmopt"
version = "0.1.0"
description = "Particle swarm optimisation with continuous and integer swarms, benchmark objectives and region-split runs"
requires-python = ">=3.10"
dependencies = []
keywords = ["optimization", "particle swarm", "pso", "rosenbrock", "rastrigin", "metaheuristic"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
swarmopt = "swarmopt.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["swarmopt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
