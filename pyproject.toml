[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "platinumrtd"
version = "1.0.0"
description = "Temperature and resistance conversions for platinum RTD sensors using the Callendar-Van Dusen equation"
requires-python = ">=3.10"
dependencies = []
keywords = ["rtd", "pt100", "pt1000", "temperature", "callendar-van-dusen", "iec-60751", "sensor"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
platinumrtd = "platinumrtd.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["platinumrtd"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
