[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "badgl"
version = "0.1.0"
description = "Pure-Python core of a small OpenGL renderer: vector and matrix math, transforms, a fly camera, procedural meshes, lights and GL version handling"
requires-python = ">=3.10"
dependencies = []
keywords = ["opengl", "glsl", "rendering", "3d", "camera", "matrix", "mesh"]
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
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["badgl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
