[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "motrack"
version = "0.4.0"
description = "Building blocks for multi-object tracking: Kalman filtering, optimal assignment and MOT metrics"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["tracking", "object-tracking", "kalman-filter", "hungarian-algorithm", "mot-metrics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Recognition",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["motrack"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
