[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tfguard"
version = "0.1.0"
description = "Rule matching, severities, root-module discovery and result filtering for Terraform security scanning"
requires-python = ">=3.10"
dependencies = []
keywords = ["terraform", "security", "static-analysis", "scanner", "rules"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Quality Assurance",
    "Topic :: Security",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tfguard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
