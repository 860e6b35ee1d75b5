[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "human_ids"
version = "0.1.1"
description = "Generate human-readable IDs"
requires-python = ">=3.10"
dependencies = []
keywords = ["id", "identifier", "human-readable", "random", "names"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
human-ids = "human_ids.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["human_ids"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
