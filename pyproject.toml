[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "progbook"
version = "0.1.0"
description = "Small worked programs on interfaces, concurrency and slices: an expression evaluator, toy servers, disk usage, memoization and more."
requires-python = ">=3.10"
keywords = ["education", "examples", "concurrency", "expression-evaluator", "interfaces"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
progbook-bytecounter = "progbook.bytecounter:main"
progbook-sleep = "progbook.sleep:main"
progbook-tempflag = "progbook.tempconv:main"
progbook-surface = "progbook.surface:main"
progbook-sorting = "progbook.sorting:main"
progbook-shop = "progbook.shop:main"
progbook-xmlselect = "progbook.xmlselect:main"
progbook-sha = "progbook.sha:main"
progbook-chat = "progbook.chat:main"
progbook-countdown = "progbook.countdown:main"
progbook-pipeline = "progbook.pipeline:main"
progbook-du = "progbook.du:main"
progbook-thumbnail = "progbook.thumbnail:main"
progbook-utf8rev = "progbook.utf8rev:main"
progbook-charcount = "progbook.charcount:main"

[tool.hatch.build.targets.wheel]
packages = ["progbook"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
