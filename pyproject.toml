[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fractoview"
version = "0.1.0"
description = "Interactive Mandelbrot, Julia and Burning Ship fractal explorer"
requires-python = ">=3.10"
dependencies = []
keywords = ["fractal", "mandelbrot", "julia", "burning-ship", "visualization", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications :: Tk",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fractoview = "fractoview.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fractoview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
