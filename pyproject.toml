[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "listalgos"
version = "0.1.0"
description = "Classic linked-list, palindrome and subsequence algorithms"
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "algorithms", "palindrome", "subsequence", "deque", "stack"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
listalgos = "listalgos.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["listalgos"]

[tool.pytest.ini_options]
addopts = "-ra"
