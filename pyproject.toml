[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kernelbench"
version = "0.1.0"
description = "Small computational kernels with self-checking reference results, usable as benchmarks"
requires-python = ">=3.10"
dependencies = []
keywords = ["benchmark", "crc32", "sha256", "huffman", "cubic", "n-body", "matrix", "dsp"]
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
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kernelbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
