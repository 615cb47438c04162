[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "borin"
version = "1.0.0"
description = "Convert between Bora's ASCII layout for Serbian text and UTF-8 Cyrillic or Latin script"
requires-python = ">=3.10"
dependencies = []
keywords = ["serbian", "cyrillic", "latin", "transliteration", "utf-8", "ascii"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Natural Language :: Serbian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["borin"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 99
target-version = "py310"
