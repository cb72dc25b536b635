[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "planetsim"
version = "0.1.0"
description = "A small planet simulator: textured spheres orbiting in a free-look 3D camera"
requires-python = ">=3.10"
keywords = ["3d", "planets", "simulation", "camera", "affine", "projection", "opengl"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "pyglet",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
planetsim = "planetsim.app:main"

[tool.hatch.build.targets.wheel]
packages = ["planetsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
