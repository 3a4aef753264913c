[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinyecs"
version = "0.1.0"
description = "A small entity-component-system framework with demo components and systems"
requires-python = ">=3.10"
dependencies = []
keywords = ["ecs", "entity-component-system", "game", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tinyecs-example = "tinyecs.demo.example:main"

[tool.hatch.build.targets.wheel]
packages = ["tinyecs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
