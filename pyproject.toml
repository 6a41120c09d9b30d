[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stegbmp"
version = "0.1.0"
description = "Hide a text file inside the least significant bits of a BMP image and recover it again."
requires-python = ">=3.10"
dependencies = []
keywords = ["steganography", "bmp", "lsb", "image"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
stegbmp = "stegbmp.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["stegbmp"]

[tool.pytest.ini_options]
addopts = "-ra"
