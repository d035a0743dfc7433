[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "puissance4"
version = "1.0.0"
description = "Terminal Connect Four game with a minimax computer opponent"
requires-python = ">=3.10"
keywords = ["connect-four", "puissance4", "game", "minimax", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: French",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
puissance4 = "puissance4.game:main"

[tool.hatch.build.targets.wheel]
packages = ["puissance4"]

[tool.pytest.ini_options]
addopts = "-ra"
