[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tabularq"
version = "0.1.0"
description = "Tabular Q-learning with pluggable action-selection strategies and a control-loop environment framework"
requires-python = ">=3.10"
dependencies = []
keywords = ["q-learning", "reinforcement-learning", "tabular", "control", "environment"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tabularq"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
