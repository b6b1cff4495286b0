[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tilesprite"
version = "0.1.0"
description = "Sprite-sheet animation, tile maps and small vector, matrix and quaternion helpers for 2D games"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["sprite", "animation", "tilemap", "staggered", "matrix", "quaternion", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tilesprite = "tilesprite.app:main"

[tool.hatch.build.targets.wheel]
packages = ["tilesprite"]

[tool.pytest.ini_options]
addopts = "-ra"
