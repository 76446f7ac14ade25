[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crop-tracker"
version = "0.1.0"
description = "A small JSON HTTP service for recording fields, sowings and harvests in SQLite"
requires-python = ">=3.10"
dependencies = [
    "flask",
]
keywords = ["agriculture", "crops", "harvest", "sowing", "rest", "sqlite"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
crop-tracker = "crop_tracker.app:main"

[tool.hatch.build.targets.wheel]
packages = ["crop_tracker"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
