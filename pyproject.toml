[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chordkit"
version = "0.1.0"
description = "Steno chording engine: reads strokes from a Gemini PR machine and writes dictionary translations"
requires-python = ">=3.10"
dependencies = [
    "pyserial",
]
keywords = ["steno", "stenography", "chording", "gemini-pr", "dictionary"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Adaptive Technologies",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
chordkit = "chordkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["chordkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
