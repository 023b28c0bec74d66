[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "exdtools"
version = "0.1.0"
description = "Build Excalidraw drawings of rectangles and connecting arrows from Python"
requires-python = ">=3.10"
dependencies = []
keywords = ["excalidraw", "diagram", "drawing", "json", "vector"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: Editors :: Vector-Based",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
exdtools = "exdtools.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["exdtools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
