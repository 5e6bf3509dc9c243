[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fourws_tracking"
version = "0.0.1"
description = "Path-following control and simulation for a four-wheel-steering vehicle along a Bezier path"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "four-wheel steering",
    "bezier",
    "path following",
    "curvature",
    "vehicle kinematics",
    "runge-kutta-gill",
    "pid",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fourws-tracking = "fourws_tracking.tracking:main"

[tool.hatch.build.targets.wheel]
packages = ["fourws_tracking"]

[tool.pytest.ini_options]
addopts = "-ra"
