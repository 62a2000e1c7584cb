[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "taskapi"
version = "0.1.0"
description = "A small JSON HTTP API for creating and listing tasks, backed by an in-memory store"
requires-python = ">=3.10"
keywords = ["tasks", "rest", "api", "flask", "http"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "flask",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
taskapi = "taskapi.app:main"

[tool.hatch.build.targets.wheel]
packages = ["taskapi"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
