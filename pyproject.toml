[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "forgecli"
version = "0.1.0"
description = "Developer toolkit CLI that generates CHANGELOG.md from git history and README.md from prompts"
requires-python = ">=3.10"
dependencies = []
keywords = ["changelog", "readme", "git", "cli", "developer-tools"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Documentation",
    "Topic :: Software Development :: Version Control :: Git",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
forge-cli = "forgecli.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["forgecli"]

[tool.pytest.ini_options]
addopts = "-ra"
