[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "animforge"
version = "0.1.0"
description = "2D animation building blocks: vectors, matrices, colours, rectangles, transforms, line-art shapes, mouse input state and a stopwatch."
requires-python = ">=3.10"
dependencies = []
keywords = ["animation", "2d", "vector", "matrix", "geometry", "color", "rectangle", "mouse"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["animforge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
