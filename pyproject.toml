[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "studykit"
version = "0.1.0"
description = "Small reference implementations: rate limiters, caches, stacks, concurrency patterns and classic puzzles"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "rate-limiting",
    "token-bucket",
    "sliding-window",
    "lru-cache",
    "singleflight",
    "pubsub",
    "worker-pool",
    "external-sort",
    "algorithms",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
studykit-extsort = "studykit.extsort:main"

[tool.hatch.build.targets.wheel]
packages = ["studykit"]

[tool.hatch.build.targets.sdist]
include = [
    "studykit",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
