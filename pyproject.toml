[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "snakeplay"
version = "0.1.0"
description = "A classic snake arcade game with a normal mode and an obstacle mode."
requires-python = ">=3.10"
keywords = ["snake", "game", "arcade", "pygame"]
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
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
snakeplay = "snakeplay.app:main"

[tool.hatch.build.targets.wheel]
packages = ["snakeplay"]

[tool.pytest.ini_options]
addopts = "-ra"
