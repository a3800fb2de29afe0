[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oscope"
version = "0.1.0"
description = "A software oscilloscope that samples a sine signal and plots it live in a scrolling time window."
requires-python = ">=3.10"
keywords = ["oscilloscope", "signal", "plot", "sine", "visualization", "matplotlib"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
]
dependencies = [
    "matplotlib",
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
oscope = "oscope.app:main"

[tool.hatch.build.targets.wheel]
packages = ["oscope"]

[tool.pytest.ini_options]
addopts = "-ra"
