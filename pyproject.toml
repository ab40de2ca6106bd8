[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "practicekit"
version = "0.1.0"
description = "Small worked examples: a line-search tool, stacks, lists, a deque, a tree, caching, conversions and classic exercises"
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "exercises", "data-structures", "grep", "examples"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minigrep = "practicekit.minigrep:main"
practicekit-greet = "practicekit.greeting:main"

[tool.hatch.build.targets.wheel]
packages = ["practicekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
