[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mindflow"
version = "0.1.0"
description = "Study planner for students: courses, grades, review questions and a yearly calendar"
requires-python = ">=3.10"
dependencies = []
keywords = ["study", "planner", "calendar", "students", "grades", "review"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mindflow = "mindflow.app:main"

[tool.hatch.build.targets.wheel]
packages = ["mindflow"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
