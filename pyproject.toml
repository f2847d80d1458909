[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "radarsim"
version = "0.1.0"
description = "An air traffic simulation: aircraft fly straight routes, control towers guard safe areas, and aircraft that meet outside them crash."
requires-python = ">=3.10"
keywords = ["simulation", "air traffic", "radar", "pygame", "game"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
radarsim = "radarsim.app:main"

[tool.hatch.build.targets.wheel]
packages = ["radarsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
