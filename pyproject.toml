[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stitchmesh"
version = "0.1.0"
description = "Turn a knit graph into a stitch mesh and write it as an OBJ file"
requires-python = ">=3.10"
dependencies = []
keywords = ["knitting", "knit graph", "stitch mesh", "mesh", "obj", "dual mesh"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
stitchmesh = "stitchmesh.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["stitchmesh"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
