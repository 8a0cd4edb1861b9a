[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "runngun"
version = "0.1.0"
description = "A small side-scrolling run-and-gun game built on pygame, with its game logic usable headless"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "side-scroller", "platformer", "shooter", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
runngun = "runngun.game:main"

[tool.hatch.build.targets.wheel]
packages = ["runngun"]

[tool.pytest.ini_options]
addopts = "-ra"
