[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "n2m"
version = "0.1.0"
description = "Turn nmap normal-output files into a Markdown notes skeleton with one section per open port"
requires-python = ">=3.10"
dependencies = []
keywords = ["nmap", "markdown", "notes", "port-scan"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Information Technology",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup :: Markdown",
    "Topic :: System :: Networking :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
n2m = "n2m.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["n2m"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
