[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "workbench"
version = "0.1.0"
description = "Seam-carving image resizer, a four-player euchre game and a naive Bayes forum-post classifier"
requires-python = ">=3.10"
keywords = ["seam carving", "ppm", "euchre", "card game", "naive bayes", "classifier"]
classifiers = [
    "Topic :: Utilities",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Text Processing :: Linguistic",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
resize = "workbench.imaging.resize:main"
euchre = "workbench.euchre.game:main"
classifier = "workbench.classifier:main"

[tool.hatch.build.targets.wheel]
packages = ["workbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
