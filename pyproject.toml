[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "animekit"
version = "0.1.0"
description = "Toolkit-free animation models: timed property animations, Perlin wave fields, a zipper slider, a sakura tree scene and animated widgets"
requires-python = ">=3.10"
dependencies = []
keywords = ["animation", "easing", "perlin", "tweening", "ui"]
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
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["animekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
