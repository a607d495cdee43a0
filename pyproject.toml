[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "starr"
version = "0.1.0"
description = "Read custom script events from Lidarr, Prowlarr, Radarr, Readarr and Sonarr, plus shared connection settings."
requires-python = ">=3.10"
dependencies = []
keywords = ["sonarr", "radarr", "lidarr", "readarr", "prowlarr", "custom-script", "environment"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["starr"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
