[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinyparse"
version = "0.1.0"
description = "Scanner and recursive-descent parser for the TINY teaching language, printing token traces and syntax trees"
requires-python = ">=3.10"
dependencies = []
keywords = ["tiny", "compiler", "parser", "scanner", "lexer", "syntax tree", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Compilers",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tinyparse = "tinyparse.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tinyparse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
