[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arachnopod"
version = "0.1.0"
description = "Command-driven module simulator for the Arachnopod walking robot's control system"
requires-python = ">=3.10"
dependencies = []
keywords = ["robotics", "simulation", "hexapod", "modules", "commands"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Human Machine Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
arachnopod-sim = "arachnopod.cvs:main"

[tool.hatch.build.targets.wheel]
packages = ["arachnopod"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
