[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bmpreveal"
version = "0.1.0"
description = "Detect the bitwise transformations behind a masked BMP image from additive masking clues"
requires-python = ">=3.10"
dependencies = ["pillow"]
keywords = ["bmp", "image", "xor", "bit rotation", "masking"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bmpreveal = "bmpreveal.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bmpreveal"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
