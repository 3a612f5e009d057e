[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hapticteleop"
version = "0.1.0"
description = "Kinematics, pose mapping and stylus state filtering for haptic-stylus teleoperation of robot arms and continuum instruments"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "haptics",
    "teleoperation",
    "kinematics",
    "continuum-robot",
    "quaternion",
    "trajectory",
]
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
    "Topic :: Scientific/Engineering :: Human Machine Interfaces",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hapticteleop-circle = "hapticteleop.continuum:main"

[tool.hatch.build.targets.wheel]
packages = ["hapticteleop"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
