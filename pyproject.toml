[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ethawin"
version = "1.0.0"
description = "Text-mode windowing toolkit with pull-down menus, pop-up dialogs and list choosers, plus a few programs built on it"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "tui",
    "text user interface",
    "curses",
    "menus",
    "dialogs",
    "scheduling",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ethawin-demo = "ethawin.demo:main"
labeler = "ethawin.labeler:main"
labor = "ethawin.labor.app:main"

[tool.hatch.build.targets.wheel]
packages = ["ethawin"]

[tool.pytest.ini_options]
addopts = "-ra"
