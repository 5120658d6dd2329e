[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lineparse"
version = "0.1.0"
description = "Line-indexed document loading for text, CSV/TSV and JSON/JSONL files"
requires-python = ">=3.10"
dependencies = []
keywords = ["parser", "csv", "tsv", "json", "jsonl", "text", "lines", "index"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lineparse = "lineparse.cli:main"
lineparse-txt = "lineparse.cli:txt_main"
lineparse-csv = "lineparse.cli:csv_main"
lineparse-json = "lineparse.cli:json_main"

[tool.hatch.build.targets.wheel]
packages = ["lineparse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
