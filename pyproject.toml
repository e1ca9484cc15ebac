[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chirpboard"
version = "0.1.0"
description = "A small text-mode social network: users, pages, posts, comments, likes and shared memories loaded from plain data files."
requires-python = ">=3.10"
dependencies = []
keywords = ["social network", "timeline", "console", "posts", "comments"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
chirpboard = "chirpboard.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["chirpboard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
