[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fdfkit"
version = "0.1.0"
description = "Character, byte and string helpers, a chunked line reader, a linked list and an isometric wireframe renderer for height maps"
requires-python = ">=3.10"
dependencies = []
keywords = ["strings", "memory", "linked-list", "line-reader", "wireframe", "isometric", "height-map"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fdfkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
