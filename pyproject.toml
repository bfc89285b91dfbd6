[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kingdomcable"
version = "0.1.0"
description = "Interactive console for setting up and managing cable Internet and TV subscriptions"
requires-python = ">=3.10"
dependencies = []
keywords = ["cable", "subscription", "internet", "tv", "console", "billing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kingdomcable = "kingdomcable.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["kingdomcable"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
