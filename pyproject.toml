[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "polysolve"
version = "0.1.0"
description = "Polygon geometry toolkit: convex hulls, areas, centroids, point containment and polygon overlap"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "geometry",
    "polygon",
    "convex hull",
    "centroid",
    "shoelace",
    "computational geometry",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
polysolve-centroid = "polysolve.centroid:main"
polysolve-hole = "polysolve.hole:main"
polysolve-scud = "polysolve.scud:main"
polysolve-hull = "polysolve.hull:main"
polysolve-membership = "polysolve.membership:main"
polysolve-tabletop = "polysolve.tabletop:main"
polysolve-trash = "polysolve.trash:main"
polysolve-overlap = "polysolve.overlap:main"

[tool.hatch.build.targets.wheel]
packages = ["polysolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
