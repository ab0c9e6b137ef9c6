[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordcounters"
version = "0.1.0"
description = "Count word frequencies in large text files in the background, with progress, pause, resume and cancel."
requires-python = ">=3.10"
dependencies = [
    "regex",
]
keywords = ["word count", "word frequency", "text", "statistics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
wordcounters = "wordcounters.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wordcounters"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
