[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "slate"
version = "0.1.0"
description = "Toolkit-independent widget tree, dashboard, header bar and colour utilities for Slate user interfaces"
requires-python = ">=3.10"
dependencies = []
keywords = ["ui", "dashboard", "widgets", "header-bar", "colour", "signals"]
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
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["slate"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
