[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "resgate"
version = "0.1.0"
description = "A small helicopter arcade game with a rocket-battery charging station, built on pygame"
requires-python = ">=3.10"
keywords = ["game", "arcade", "helicopter", "pygame"]
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
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
resgate = "resgate.game:main"

[tool.hatch.build.targets.wheel]
packages = ["resgate"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
