[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "asciireel"
version = "0.1.0"
description = "Turn video files into ASCII art and play them in the terminal with audio"
requires-python = ">=3.10"
dependencies = []
keywords = ["ascii", "ascii-art", "video", "terminal", "ffmpeg", "jp2a", "player"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Video :: Display",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
asciireel = "asciireel.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["asciireel"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
