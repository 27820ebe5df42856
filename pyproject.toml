[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "bankdesk"
version = "0.1.0"
description = "A console banking desk for clients, employees and admins, kept in flat text files"
requires-python = ">=3.10"
dependencies = []
keywords = ["bank", "console", "accounts", "clients", "employees"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bankdesk = "bankdesk.screens:main"

[tool.setuptools.packages.find]
include = ["bankdesk*"]

[tool.pytest.ini_options]
addopts = "-ra"
