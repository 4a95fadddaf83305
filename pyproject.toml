[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "pslister"
version = "0.1.0"
description = "Building blocks for PostScript text listings: page ranges, escaping, page layout, prologue documentation, and file and pipe streams"
requires-python = ">=3.10"
dependencies = []
keywords = ["postscript", "printing", "page-range", "listing", "text"]
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
    "Topic :: Printing",
    "Topic :: Text Processing :: Filters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["pslister*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
