[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mixbag"
version = "0.1.0"
description = "A threaded quicksort, a prefix-sharing completion dictionary, self-describing shapes and a networked Reversi player."
requires-python = ">=3.10"
dependencies = []
keywords = ["othello", "reversi", "quicksort", "completion", "game-client"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mixbag-quicksort = "mixbag.quicksort:main"
mixbag-completion = "mixbag.completion:main"
mixbag-shapes = "mixbag.shapes:main"
mixbag-client = "mixbag.client:main"

[tool.hatch.build.targets.wheel]
packages = ["mixbag"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
