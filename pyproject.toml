[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xlwgen"
version = "0.1.0"
description = "Generate spreadsheet add-in registration and wrapper code from annotated C++ interface headers"
requires-python = ">=3.10"
dependencies = []
keywords = ["code generation", "spreadsheet", "add-in", "interface generator", "wrappers"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Programming Language :: C++",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
xlwgen = "xlwgen.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["xlwgen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
