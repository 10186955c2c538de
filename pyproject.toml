[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "microlibrary"
version = "0.1.0"
description = "Error codes, assertions and fault-reporting output streams for embedded-style code"
requires-python = ">=3.10"
dependencies = []
keywords = ["embedded", "error-code", "stream", "assertion", "microcontroller"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["microlibrary"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
