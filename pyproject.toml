[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "healthdesk"
version = "0.29.0"
description = "Offline medical reference data and SQLite disease-database queries: medications, nutrition, screenings, vaccines, onset, prognosis, risk and similarity."
requires-python = ">=3.10"
dependencies = []
keywords = ["health", "medical", "offline", "reference", "sqlite", "screening", "vaccines"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Healthcare Industry",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["healthdesk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
