[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rmpl"
version = "0.1.0"
description = "RRT motion planning for geometric, velocity- and acceleration-controlled 2D robots"
requires-python = ">=3.10"
dependencies = []
keywords = ["motion planning", "rrt", "robotics", "kinodynamic", "path planning"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
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
rmpl = "rmpl.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rmpl"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
