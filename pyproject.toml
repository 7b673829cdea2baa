[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "splash-cli"
version = "4.0.0"
description = "Command-line helpers for Unsplash wallpapers: collection aliases, user settings and sign-out"
requires-python = ">=3.10"
dependencies = [
    "jinja2",
]
keywords = ["unsplash", "wallpaper", "photos", "cli", "desktop"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
splash = "splash_cli.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["splash_cli"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
