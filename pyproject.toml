[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixelpad"
version = "0.1.0"
description = "A small keyboard-driven pixel sandbox: a square of random noise you steer with WASD."
requires-python = ">=3.10"
keywords = ["game", "pygame", "pixels", "keyboard", "input"]
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
    "Topic :: Games/Entertainment",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pixelpad = "pixelpad.app:main"

[tool.hatch.build.targets.wheel]
packages = ["pixelpad"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
