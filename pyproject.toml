[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "glplotlive"
version = "0.1.0"
description = "Renderer-independent model of live 2D plot lines, plot layouts and interactive buttons"
requires-python = ">=3.10"
dependencies = []
keywords = ["plotting", "live plot", "visualization", "lines", "layout"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["glplotlive"]

[tool.pytest.ini_options]
addopts = "-ra"
