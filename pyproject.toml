[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "buckshot"
version = "0.1.0"
description = "A two-player shotgun roulette game for writing bots and pitting them against each other"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "bots", "turn-based", "roulette", "strategy"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Turn Based Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
buckshot = "buckshot.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["buckshot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
