[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rasterkit"
version = "0.1.0"
description = "Raster graphics algorithms on integer pixel grids: DDA and Bresenham lines, circles, Bezier and Koch curves, clipping and seed fills"
requires-python = ">=3.10"
dependencies = []
keywords = ["raster", "bresenham", "dda", "clipping", "bezier", "koch", "flood-fill", "ppm"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
rasterkit = "rasterkit.scenes:main"

[tool.hatch.build.targets.wheel]
packages = ["rasterkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
