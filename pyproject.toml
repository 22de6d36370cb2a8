[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "elenco"
version = "0.1.0"
description = "Terminal manager for a football club's squad and match records, with reports, queries and CSV export"
requires-python = ">=3.10"
dependencies = []
keywords = ["football", "soccer", "squad", "roster", "matches", "csv", "reports"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: POSIX",
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
elenco = "elenco.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["elenco"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
