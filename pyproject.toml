[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pdfdraw"
version = "0.1.0"
description = "Extract path-drawing commands (moves, lines, Bezier curves, transforms) from the Flate-compressed content streams of PDF files"
requires-python = ">=3.10"
dependencies = []
keywords = ["pdf", "vector", "paths", "bezier", "content-stream", "xref"]
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
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pdfdraw = "pdfdraw.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pdfdraw"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
