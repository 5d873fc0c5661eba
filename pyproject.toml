[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spritekit"
version = "0.1.0"
description = "A small instanced 2D sprite renderer with a frame clock, texture atlases and a demo game loop"
requires-python = ">=3.10"
keywords = ["sprites", "opengl", "instancing", "texture-atlas", "game-loop", "2d"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Games/Entertainment",
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
spritekit = "spritekit.app:main"

[tool.hatch.build.targets.wheel]
packages = ["spritekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
