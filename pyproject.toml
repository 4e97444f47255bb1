[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "puebloquest"
version = "0.1.0"
description = "A small terminal role-playing adventure: win a shield, earn a sword, answer the troll and free the village."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "terminal", "curses", "role-playing", "adventure", "text-mode"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
puebloquest = "puebloquest.router:main"

[tool.hatch.build.targets.wheel]
packages = ["puebloquest"]

[tool.pytest.ini_options]
addopts = "-ra"
