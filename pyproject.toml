[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinyfs"
version = "0.1.0"
description = "A tiny in-memory tree file system with a minimal command shell and a text-screen model"
requires-python = ">=3.10"
dependencies = []
keywords = ["filesystem", "shell", "in-memory", "text-screen", "scan-codes"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tinyfs = "tinyfs.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["tinyfs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
