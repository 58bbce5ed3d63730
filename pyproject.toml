[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labtools"
version = "0.1.0"
description = "Small command-line utilities: Cyrillic 8-bit to UTF-8 recoding, a current-weather report, and a recursive directory tree listing."
requires-python = ">=3.10"
dependencies = []
keywords = ["encoding", "cp1251", "koi8", "iso-8859-5", "utf-8", "weather", "directory tree"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labtools-recode = "labtools.recode:main"
labtools-weather = "labtools.weather:main"
labtools-dirtree = "labtools.dirtree:main"

[tool.hatch.build.targets.wheel]
packages = ["labtools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
