[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "csexercises"
version = "1.0.0"
description = "Classic programming exercises: fractions, grade reports, calendars, ordered pairs, the eight queens puzzle and a creature battle arena."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "exercises",
    "fraction",
    "calendar",
    "eight-queens",
    "grades",
]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
csex-grades = "csexercises.student_scores:main"
csex-fractions = "csexercises.fraction_client:main"
csex-calendar = "csexercises.calendar_gen:main"
csex-pairs = "csexercises.ordered_pair:main"
csex-queens = "csexercises.queens:main"
csex-arena = "csexercises.creatures_b:main"

[tool.hatch.build.targets.wheel]
packages = ["csexercises"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
