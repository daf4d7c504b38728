[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "datapad"
version = "0.1.0"
description = "A terminal note-taking application with Markdown preview, tags and image attachments"
requires-python = ">=3.10"
dependencies = [
    "markdown",
]
keywords = ["notes", "terminal", "tui", "markdown", "notebook"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: News/Diary",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
datapad = "datapad.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["datapad"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
