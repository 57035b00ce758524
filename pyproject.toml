[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "retrocommon"
version = "0.1.0"
description = "Path name handling, UTF conversion helpers and C-style string utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["paths", "archive", "utf-8", "utf-16", "utf-32", "strings", "strlcpy"]
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["retrocommon"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
