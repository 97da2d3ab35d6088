[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blockaes"
version = "0.1.0"
description = "Pure-Python AES block cipher with ECB file encryption and a command-line tool"
requires-python = ">=3.10"
dependencies = []
keywords = ["aes", "rijndael", "block cipher", "ecb", "encryption", "cryptography"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
blockaes = "blockaes.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["blockaes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
