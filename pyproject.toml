[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pingdomkit"
version = "0.1.0"
description = "Request and response models for the Pingdom monitoring API"
requires-python = ">=3.10"
dependencies = []
keywords = ["pingdom", "monitoring", "uptime", "api", "checks", "maintenance"]
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
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pingdomkit"]

[tool.pytest.ini_options]
addopts = "-ra"
