[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "emberfield"
version = "0.1.0"
description = "Fire particle simulation, free-look camera, spot lights, vertex layouts and shader source parsing for real-time 3D scenes"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["particles", "camera", "lighting", "shader", "glsl", "3d", "rendering"]
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
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["emberfield"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
