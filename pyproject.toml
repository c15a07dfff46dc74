[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "maxwellkit"
version = "0.1.0"
description = "Building blocks for time-domain Maxwell solvers: materials, models, sources, probes and radar cross section post-processing."
requires-python = ">=3.10"
dependencies = []
keywords = ["maxwell", "electromagnetics", "dgtd", "rcs", "plane wave", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["maxwellkit"]

[tool.pytest.ini_options]
addopts = "-ra"
