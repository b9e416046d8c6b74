[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crashlog"
version = "0.1.0"
description = "Read and write the BERT, BERR and CPER containers that carry Crash Log records."
requires-python = ">=3.10"
dependencies = []
keywords = ["crashlog", "bert", "berr", "cper", "acpi", "firmware", "error-record"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Hardware",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["crashlog"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
