[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patternbook"
version = "0.1.0"
description = "Small, runnable examples of classic object-oriented design patterns: decorator, composite, factory, iterator, mediator and memento."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "design-patterns",
    "decorator",
    "composite",
    "factory",
    "iterator",
    "mediator",
    "memento",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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
patternbook-pizza = "patternbook.pizza_decorator:main"
patternbook-coffee = "patternbook.coffee_decorator:main"
patternbook-chat = "patternbook.chat:main"
patternbook-vehicles = "patternbook.vehicles:main"
patternbook-complex-memento = "patternbook.complex_memento:main"
patternbook-building = "patternbook.building:main"
patternbook-iterators = "patternbook.iterator_demo:main"
patternbook-pizza-menu = "patternbook.pizza_menu:main"

[tool.hatch.build.targets.wheel]
packages = ["patternbook"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
