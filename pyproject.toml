[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "audiofocus"
version = "0.1.1"
description = "Media source identity, audio session tracking and playback-ownership arbitration logic"
requires-python = ">=3.10"
dependencies = [
    "psutil",
]
keywords = [
    "audio",
    "media",
    "playback",
    "arbitration",
    "audio-focus",
    "sessions",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["audiofocus"]

[tool.hatch.build.targets.sdist]
include = [
    "audiofocus",
    "tests",
    "pyproject.toml",
    "README.md",
]

[tool.pytest.ini_options]
testpaths = ["tests"]
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
