[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linkedcollections"
version = "0.1.0"
description = "Node-based doubly linked list, queue and stack collections"
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "doubly linked list", "queue", "stack", "data structures"]
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
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
linkedcollections-demo = "linkedcollections.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["linkedcollections"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
