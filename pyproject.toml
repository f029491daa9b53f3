[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minishparse"
version = "0.1.0"
description = "Command-line tokenizing, syntax and quote checking, and environment parsing for a small interactive shell"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "lexer", "tokenizer", "syntax", "environment", "repl"]
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
    "Topic :: System :: Shells",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minishparse = "minishparse.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["minishparse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
