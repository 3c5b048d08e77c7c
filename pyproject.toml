[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shellkit"
version = "0.1.0"
description = "String helpers, printf-style output, line reading, here-documents and redirection handling for a small interactive shell"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "heredoc", "redirection", "printf", "strings"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
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

[tool.hatch.build.targets.wheel]
packages = ["shellkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
