[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "echolab"
version = "0.1.0"
description = "TCP and UDP echo servers and clients, a small thread-safe logger, and classic list and sorting routines"
requires-python = ">=3.10"
dependencies = []
keywords = ["echo", "tcp", "udp", "socket", "logging", "linked-list", "sorting"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: System :: Networking",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
echolab-sort = "echolab.sorting:main"
echolab-tcp-server = "echolab.tcp:server_main"
echolab-tcp-client = "echolab.tcp:client_main"
echolab-udp-server = "echolab.udp:server_main"
echolab-udp-client = "echolab.udp:client_main"

[tool.hatch.build.targets.wheel]
packages = ["echolab"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
