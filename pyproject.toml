[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "todoweather"
version = "0.1.0"
description = "Models, repositories and controllers for a to-do list and a weather forecast view"
requires-python = ">=3.10"
dependencies = []
keywords = ["mvc", "todo", "weather", "forecast", "controller", "view-model"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["todoweather"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
