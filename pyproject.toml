[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "urlbroker"
version = "0.1.0"
description = "A small publish/subscribe broker with topics, publishers and subscribers, plus a command-line URL publisher"
requires-python = ">=3.10"
dependencies = []
keywords = ["publish-subscribe", "pubsub", "broker", "topic", "observer"]
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
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
urlbroker = "urlbroker.app:main"

[tool.hatch.build.targets.wheel]
packages = ["urlbroker"]

[tool.pytest.ini_options]
addopts = "-ra"
