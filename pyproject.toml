[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trasesvg"
version = "0.1.0"
description = "SVG drawing backend for plotting: paths, shapes, text, mouseover effects and keyframe animation"
requires-python = ">=3.10"
dependencies = []
keywords = ["svg", "plotting", "animation", "visualization", "vector graphics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["trasesvg"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
