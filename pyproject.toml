[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crusttools"
version = "0.1.0"
description = "Small command-line tools: a word counter and a checker for flat JSON objects of string pairs"
requires-python = ">=3.10"
dependencies = []
keywords = ["wc", "word count", "json", "validator", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
crust-wc = "crusttools.wc:main"
crust-jsoncheck = "crusttools.jsoncheck:main"

[tool.hatch.build.targets.wheel]
packages = ["crusttools"]

[tool.pytest.ini_options]
addopts = "-ra"
