[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oscpack"
version = "0.4.2"
description = "Encoding and decoding of Open Sound Control (OSC) 1.0 packets"
requires-python = ">=3.10"
dependencies = []
keywords = ["OSC", "open sound control", "audio", "serialization", "deserialization"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["oscpack"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
