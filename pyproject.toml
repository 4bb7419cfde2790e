[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "storyforge"
version = "0.1.0"
description = "Game-side data model for story-driven role-playing games: grid inventories, items, dialogue assets, characters and level music."
requires-python = ">=3.10"
dependencies = []
keywords = ["rpg", "inventory", "dialogue", "game", "immersive-sim"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["storyforge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
