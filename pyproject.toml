[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rustlings"
version = "5.6.1"
description = "Helpers for a course of small programming exercises: coloured status lines, rust-project.json generation and worked solutions."
requires-python = ">=3.11"
keywords = ["exercises", "learning", "education", "rust-analyzer", "solutions"]
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
packages = ["rustlings"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
warn_redundant_casts = true
