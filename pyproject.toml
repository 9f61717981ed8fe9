[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kvtfutils"
version = "0.1.0"
description = "Helpers for KubeVirt resource data: schema conversions, field validators, JSON patch diffs and Kubernetes quantities"
requires-python = ">=3.10"
dependencies = []
keywords = ["kubevirt", "kubernetes", "json-patch", "validation", "quantity"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kvtfutils"]

[tool.pytest.ini_options]
addopts = "-ra"
