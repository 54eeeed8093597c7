[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gmpvkit"
version = "0.1.0"
description = "Media player front-end logic: seek bar labels, shortcut tables, MPRIS interfaces and media key handling"
requires-python = ">=3.10"
dependencies = []
keywords = ["mpv", "mpris", "media-player", "media-keys", "seek-bar", "shortcuts"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Players",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gmpvkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
