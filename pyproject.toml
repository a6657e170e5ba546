[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tilekit"
version = "0.1.0"
description = "Building blocks for tiling window managers: regions, layouts, hooks and process helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["window-manager", "tiling", "layout", "x11", "hooks"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: Window Managers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tilekit"]

[tool.pytest.ini_options]
addopts = "-ra"
