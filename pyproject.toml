[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "logreasoner"
version = "0.1.0"
description = "Log analysis tool that groups similar log lines into patterns and reports the most frequent ones"
requires-python = ">=3.10"
dependencies = [
    "requests",
]
keywords = ["logs", "log analysis", "grouping", "embeddings", "ollama"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: Log Analysis",
    "Topic :: System :: Logging",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
log-reasoner = "logreasoner.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["logreasoner"]

[tool.pytest.ini_options]
addopts = "-ra"
