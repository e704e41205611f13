[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "artillery"
version = "0.1.0"
description = "Two-player artillery duel on destructible spline-generated terrain"
requires-python = ">=3.10"
keywords = ["game", "artillery", "tanks", "pygame", "terrain"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "numpy",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
artillery = "artillery.app:main"

[tool.hatch.build.targets.wheel]
packages = ["artillery"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
