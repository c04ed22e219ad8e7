[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rigbuilder"
version = "0.1.0"
description = "Interactive console shop for configuring PC and Mac desktops, laptops and tablets"
requires-python = ">=3.10"
dependencies = []
keywords = ["computer", "configurator", "simulation", "console", "shop"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rigbuilder = "rigbuilder.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rigbuilder"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
