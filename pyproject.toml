[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "pyminishell"
version = "0.1.0"
description = "Lexer, parser, variable expansion, environment and builtin commands for a small Unix shell"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "lexer", "parser", "expansion", "builtins", "posix"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["pyminishell*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
