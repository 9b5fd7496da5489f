[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arenashooter"
version = "0.1.0"
description = "A small top-down arena shooter: dodge the chaser, shoot it down."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "shooter", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
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

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
arenashooter = "arenashooter.game:main"

[tool.hatch.build.targets.wheel]
packages = ["arenashooter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
