[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "categories"
version = "0.1.0"
description = "Finite categories over generic objects with memoised products, coproducts and exponentials"
requires-python = ">=3.10"
keywords = ["mathematics", "categories", "category-theory", "morphisms"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["categories"]

[tool.pytest.ini_options]
addopts = "-ra"
