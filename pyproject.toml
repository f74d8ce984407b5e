[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drillbook"
version = "5.5.1"
description = "Helpers for a course of small exercises: status lines, rust-project.json generation and worked lesson solutions"
requires-python = ">=3.11"
keywords = ["exercises", "learning", "education", "training", "rust-analyzer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Computer Aided Instruction (CAI)",
]
dependencies = [
    "rich",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["drillbook"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
