[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "healthco"
version = "0.1.0"
description = "Patient records with diagnosis-based vitals alerts and hospital/GP notifications"
requires-python = ">=3.10"
dependencies = []
keywords = ["patients", "vitals", "alerts", "healthcare", "observer", "strategy"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Healthcare Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
healthco = "healthco.system:main"

[tool.hatch.build.targets.wheel]
packages = ["healthco"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
