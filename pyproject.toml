[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mshparse"
version = "0.1.0"
description = "Command-line tokenizer, flagger, syntax checker and $-expander for a small interactive shell"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "parser", "tokenizer", "lexer", "expansion"]
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
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mshparse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
