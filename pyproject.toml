[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cardtable"
version = "0.1.0"
description = "Terminal card games: Bataille, Uno, Scopa, Briscola and 8 Americain"
requires-python = ">=3.10"
dependencies = []
keywords = ["cards", "games", "uno", "briscola", "scopa", "bataille", "crazy eights", "terminal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cardtable = "cardtable.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cardtable"]

[tool.pytest.ini_options]
addopts = "-ra"
