[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rpncalc"
version = "0.1.0"
description = "Expression calculator that converts infix input to reverse Polish notation and evaluates it"
requires-python = ">=3.10"
dependencies = []
keywords = ["calculator", "rpn", "shunting-yard", "expression", "parser"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rpncalc = "rpncalc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rpncalc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
