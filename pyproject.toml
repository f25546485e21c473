[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ursa"
version = "0.1.0"
description = "A small OpenGL rendering demo: a rotating textured quad drawn through a simple shader wrapper"
requires-python = ">=3.10"
keywords = ["opengl", "rendering", "shader", "graphics", "pyglet", "glsl"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "pyglet",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ursa = "ursa.app:main"

[tool.hatch.build.targets.wheel]
packages = ["ursa"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
