[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zeroshell"
version = "0.1.0"
description = "A small interactive shell with built-in file and text commands"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "repl", "command-line", "coreutils"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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

[project.scripts]
zeroshell = "zeroshell.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["zeroshell"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
