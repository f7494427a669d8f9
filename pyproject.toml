[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quadsolve"
version = "1.0.0"
description = "Quadratic equation solver with an interactive calculator and a table-driven self-check mode"
requires-python = ">=3.10"
dependencies = []
keywords = ["quadratic", "equation", "solver", "roots", "discriminant"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
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
quadsolve = "quadsolve.console:main"

[tool.hatch.build.targets.wheel]
packages = ["quadsolve"]

[tool.pytest.ini_options]
addopts = "-ra"
