[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "reprotools"
version = "0.1.0"
description = "Helpers for generating C++ build inputs: identifiers, data literals, string matchers, write-if-changed files and plist merging"
requires-python = ">=3.10"
dependencies = []
keywords = ["c++", "code-generation", "binary-data", "plist", "build"]
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
    "Programming Language :: C++",
    "Topic :: Software Development :: Build Tools",
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
plist-merger = "reprotools.plist_merger:main"

[tool.hatch.build.targets.wheel]
packages = ["reprotools"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
