[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "reacharm"
version = "0.1.0"
description = "Kinematic robot-arm primitives: forward and inverse kinematics, arm geometry, sensor readings, a PD joint controller and task goals."
requires-python = ">=3.10"
dependencies = []
keywords = ["robotics", "kinematics", "inverse-kinematics", "robot-arm", "controller", "goals"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["reacharm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
