[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tensixviz"
version = "0.1.0"
description = "Telemetry-driven building blocks for terminal visualizations of accelerator hardware"
requires-python = ">=3.10"
dependencies = []
keywords = ["monitoring", "telemetry", "visualization", "terminal", "ansi", "accelerator"]
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
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tensixviz"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
