[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lsrender"
version = "0.1.0"
description = "Styled terminal cells for file listings: widths, escaping, tree lines, column renderers, timestamps and icons"
requires-python = ">=3.10"
dependencies = [
    "wcwidth",
]
keywords = ["ls", "terminal", "ansi", "tree", "file listing", "icons"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["lsrender"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
