[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "saucerlights"
version = "0.1.0"
description = "Simulation of an RGB pinball saucer light controller: mode detection, colour patterns, afterglow and flasher effects."
requires-python = ">=3.10"
dependencies = []
keywords = ["pinball", "led", "ws2812", "simulation", "hsv", "lighting"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
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
saucerlights = "saucerlights.controller:main"

[tool.hatch.build.targets.wheel]
packages = ["saucerlights"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
