[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xvtools"
version = "0.1.0"
description = "Small teaching-system utilities: grep, wc, ls, find, a shell command parser, a disk image builder and helpers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "utilities",
    "shell",
    "grep",
    "file-system",
    "mkfs",
    "allocator",
    "teaching",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
xv-grep = "xvtools.grep:main"
xv-wc = "xvtools.wc:main"
xv-cat = "xvtools.coreutils:cat_main"
xv-echo = "xvtools.coreutils:echo_main"
xv-kill = "xvtools.coreutils:kill_main"
xv-ln = "xvtools.coreutils:ln_main"
xv-mkdir = "xvtools.coreutils:mkdir_main"
xv-rm = "xvtools.coreutils:rm_main"
xv-sleep = "xvtools.coreutils:sleep_main"
xv-call = "xvtools.coreutils:call_main"
xv-ls = "xvtools.listing:ls_main"
xv-find = "xvtools.listing:find_main"
xv-primes = "xvtools.primes:main"
xv-mkfs = "xvtools.mkfs:main"

[tool.hatch.build.targets.wheel]
packages = ["xvtools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
