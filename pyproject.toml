[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "miku"
version = "0.1.0"
description = "Foundation toolkit for an instant-messaging server: checksums, codecs, memory pools, containers, logging, configuration and service discovery."
requires-python = ">=3.10"
dependencies = []
keywords = ["im", "messaging", "hashmap", "red-black tree", "crc32", "sha1", "base64", "config", "service discovery"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
packages = ["miku"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
