[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termedit"
version = "0.1.0"
description = "A minimal full-screen text editor for ANSI terminals, built on a tiny layout toolkit"
requires-python = ">=3.10"
dependencies = []
keywords = ["editor", "terminal", "ansi", "tui", "text"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
termedit = "termedit.terminal:main"

[tool.hatch.build.targets.wheel]
packages = ["termedit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
