[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tankcombat"
version = "0.1.0"
description = "Game logic for a two-tank arena combat game: tanks, ricocheting shells, camera maths and materials"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "tank", "combat", "arcade", "simulation"]
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
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tankcombat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
