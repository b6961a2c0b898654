[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sandengine"
version = "0.1.0"
description = "A small OpenGL 3.3 rendering engine with a fly camera, OBJ mesh loading and a sandbox viewer"
requires-python = ">=3.10"
keywords = ["opengl", "rendering", "3d", "camera", "obj", "pyglet"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sandengine-sandbox = "sandengine.sandbox:main"

[tool.hatch.build.targets.wheel]
packages = ["sandengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
