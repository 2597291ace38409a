[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bioskop"
version = "0.1.0"
description = "A small JSON web service for managing books and their categories, stored in SQLite"
requires-python = ">=3.10"
keywords = ["books", "categories", "rest", "json", "flask", "sqlite", "crud"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
]
dependencies = [
    "flask>=2.2",
    "python-dotenv>=1.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
bioskop = "bioskop.app:main"

[tool.hatch.build.targets.wheel]
packages = ["bioskop"]

[tool.hatch.build.targets.sdist]
include = ["bioskop", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
