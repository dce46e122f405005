[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sysdemos"
version = "0.1.0"
description = "Small systems-programming demonstrations: rationals, points, logging, word tables, an allocator, file I/O, memory-mapped files and thread synchronisation"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "systems programming",
    "rational numbers",
    "allocator",
    "spin lock",
    "semaphore",
    "monitor",
    "threads",
    "mmap",
    "parity",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sysdemos-rational = "sysdemos.rational:main"
sysdemos-point = "sysdemos.point:main"
sysdemos-lwlog = "sysdemos.lwlog:main"
sysdemos-wordtable = "sysdemos.wordtable:main"
sysdemos-wordcount-sort = "sysdemos.wordcount_sort:main"
sysdemos-employee = "sysdemos.employee:main"
sysdemos-regex = "sysdemos.regex_match:main"
sysdemos-parity = "sysdemos.parity:main"
sysdemos-allocator = "sysdemos.allocator:main"
sysdemos-write = "sysdemos.fileio:write_main"
sysdemos-read = "sysdemos.fileio:read_main"
sysdemos-shm-producer = "sysdemos.shared_memory:producer_main"
sysdemos-shm-consumer = "sysdemos.shared_memory:consumer_main"
sysdemos-counting = "sysdemos.counting:main"
sysdemos-mq-producer = "sysdemos.message_queue:producer_main"
sysdemos-mq-consumer = "sysdemos.message_queue:consumer_main"
sysdemos-threads = "sysdemos.pthread_examples:main"

[tool.hatch.build.targets.wheel]
packages = ["sysdemos"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
