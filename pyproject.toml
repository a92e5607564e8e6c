[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "enginecore"
version = "0.1.0"
description = "Core building blocks for a small 3D engine: vector, quaternion and matrix math, transforms, bounding boxes, containers, delegates, reflection and strings."
requires-python = ">=3.10"
dependencies = []
keywords = ["engine", "math", "vector", "matrix", "quaternion", "transform", "containers", "delegate"]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["enginecore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
