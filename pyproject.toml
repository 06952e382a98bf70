[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "analogcore"
version = "1.0.0"
description = "Component-level models of analog parts and a two-transistor clipper circuit for audio processing"
requires-python = ">=3.10"
dependencies = []
keywords = ["audio", "dsp", "analog", "circuit", "distortion", "clipper", "transistor", "diode"]
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
    "Topic :: Multimedia :: Sound/Audio :: Analysis",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["analogcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
