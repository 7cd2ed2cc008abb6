[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tilequake"
version = "0.1.0"
description = "A small tile-based first person engine with chunked world meshes, box collision and an OpenGL renderer"
requires-python = ">=3.10"
keywords = ["game", "engine", "opengl", "first-person", "tiles", "collision"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: First Person Shooters",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "pyglet",
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tilequake = "tilequake.game:main"

[tool.hatch.build.targets.wheel]
packages = ["tilequake"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
