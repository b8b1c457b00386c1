[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rigsmith"
version = "0.1.0"
description = "3D math, convex hulls, primitive shapes and reactive project settings for vehicle rig editing"
requires-python = ">=3.10"
dependencies = []
keywords = ["3d", "geometry", "convex-hull", "quaternion", "matrix", "mesh", "rigging"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rigsmith"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
