[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labkit"
version = "0.1.0"
description = "Robust I/O and socket helpers, a CGI adder and a job-control shell with its test programs"
requires-python = ">=3.10"
dependencies = []
keywords = ["cgi", "sockets", "shell", "job-control", "robust-io"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
adder = "labkit.adder:main"
proxy = "labkit.proxy:main"
tsh = "labkit.tsh:main"
myspin = "labkit.testprogs:myspin_main"
myint = "labkit.testprogs:myint_main"
mystop = "labkit.testprogs:mystop_main"
mysplit = "labkit.testprogs:mysplit_main"

[tool.hatch.build.targets.wheel]
packages = ["labkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
