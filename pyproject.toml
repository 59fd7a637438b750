[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "asparserations"
version = "1.0.0"
description = "LR(1) and LALR(1) parse table generator that emits the grammar and table as JSON"
requires-python = ">=3.10"
dependencies = []
keywords = ["parser", "parser-generator", "lr1", "lalr", "grammar", "json", "compiler"]
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
    "Topic :: Software Development :: Code Generators",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
asparserations-bootstrap-json = "asparserations.grammar_syntax:main"

[tool.hatch.build.targets.wheel]
packages = ["asparserations"]

[tool.pytest.ini_options]
addopts = "-ra"
