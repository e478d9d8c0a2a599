[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scrapyard"
version = "0.1.0"
description = "Core of a small 2D entity-component-system game engine: generational indices, components, systems, SAT picking and input tracking"
requires-python = ">=3.10"
keywords = ["ecs", "entity-component-system", "game-engine", "generational-index", "collision", "separating-axis"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["scrapyard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
