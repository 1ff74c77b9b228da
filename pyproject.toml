[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dtts"
version = "0.1.0"
description = "A small arcade game: keep the bird bouncing between walls without touching the spikes."
requires-python = ">=3.10"
keywords = ["game", "arcade", "pygame", "spikes", "bird"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pygame",
]

[project.scripts]
dtts = "dtts.app:main"

[tool.hatch.build.targets.wheel]
packages = ["dtts"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
