[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ordkit"
version = "0.1.0"
description = "Ordinal theory toolkit: sat numbering, rarity, inscription envelopes and object notation parsing"
requires-python = ">=3.10"
dependencies = []
keywords = ["bitcoin", "ordinals", "sats", "inscriptions", "rarity"]
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

[project.scripts]
ordkit = "ordkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ordkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
