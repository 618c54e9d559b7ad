[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vintfkit"
version = "0.1.0"
description = "Value types, parsers and helpers for Android VINTF metadata"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "android",
    "vintf",
    "hal",
    "kernel-config",
    "compatibility-matrix",
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
    "Topic :: System :: Operating System",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vintfkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
