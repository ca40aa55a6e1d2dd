[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "orchard-blockio"
version = "0.1.0"
description = "Read-only block I/O layer for inspecting disk images and raw devices"
requires-python = ">=3.10"
dependencies = []
keywords = ["block-io", "disk-image", "raw-device", "filesystem", "positional-read"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["orchard_blockio"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
