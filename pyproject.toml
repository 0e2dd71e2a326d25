[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kelib"
version = "0.1.0"
description = "Small building blocks: bit arithmetic, float helpers, sequence helpers, a priority queue, reference counting, string, time and file-system utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["bits", "priority-queue", "refcounting", "strings", "mutex", "utilities"]
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kelib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 99
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
