[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pplay"
version = "0.1.0"
description = "Media library helpers: cache paths, a binary media info format, search-name cleaning and tolerant HTML form and link extraction"
requires-python = ">=3.10"
dependencies = []
keywords = ["media", "player", "metadata", "cache", "html", "forms", "links"]
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
    "Topic :: Multimedia :: Video :: Display",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pplay"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
