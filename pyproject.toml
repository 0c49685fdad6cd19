[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rasterlab"
version = "0.1.0"
description = "15-bit pixel buffers and shape types, an uncompressed BMP reader and writer, and a small binary search tree"
requires-python = ">=3.10"
dependencies = []
keywords = ["bmp", "bitmap", "raster", "pixels", "bgr555", "binary search tree"]
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
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rasterlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
