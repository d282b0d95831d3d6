[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hsearchiver"
version = "0.1.0"
description = "Multi-file archiver using canonical Huffman coding"
requires-python = ">=3.10"
dependencies = []
keywords = ["archiver", "huffman", "compression", "canonical-huffman"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving :: Compression",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hsearchiver = "hsearchiver.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hsearchiver"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
