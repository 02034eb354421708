[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "evtr"
version = "0.1.0"
description = "Configuration, key bindings, input model and layout planning for inspecting Linux evdev input devices"
requires-python = ">=3.11"
dependencies = [
    "tomli-w",
]
keywords = ["evdev", "linux", "input", "tui", "terminal", "joystick", "gamepad"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["evtr"]

[tool.hatch.build.targets.sdist]
include = [
    "evtr",
    "tests",
    "pyproject.toml",
    "README.md",
]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
warn_redundant_casts = true
