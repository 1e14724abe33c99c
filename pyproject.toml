[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "favifind"
version = "0.1.0"
description = "Find favicons for websites in HTML link tags, web app manifests and well-known server paths."
requires-python = ">=3.10"
keywords = ["favicon", "icon", "html", "manifest", "web"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
]
dependencies = [
    "requests>=2.25",
    "beautifulsoup4>=4.9",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
    "responses>=0.23",
]

[project.scripts]
favifind = "favifind.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["favifind"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
