[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cglraster"
version = "0.1.0"
description = "SVG scene loading, 2D transforms, polygon triangulation and mipmapped textures for a software rasterizer"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["svg", "rasterization", "graphics", "texture", "mipmap", "triangulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
packages = ["cglraster"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
