[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "osdemos"
version = "0.1.0"
description = "Small runnable demonstrations of operating-system concepts: processes, scheduling, threads, locks, condition variables and semaphores"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating systems",
    "education",
    "threads",
    "concurrency",
    "semaphores",
    "condition variables",
    "scheduling",
    "processes",
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
osdemos-cpu = "osdemos.intro:cpu_main"
osdemos-io = "osdemos.intro:io_main"
osdemos-mem = "osdemos.intro:mem_main"
osdemos-threads = "osdemos.intro:threads_main"
osdemos-va = "osdemos.intro:va_main"
osdemos-process = "osdemos.process:main"
osdemos-lottery = "osdemos.lottery:main"
osdemos-udp-client = "osdemos.udp:client_main"
osdemos-udp-server = "osdemos.udp:server_main"
osdemos-zemaphore = "osdemos.zemaphore:main"
osdemos-t0 = "osdemos.threadsapi:t0_main"
osdemos-t1 = "osdemos.threadsapi:t1_main"
osdemos-bugs = "osdemos.bugs:main"
osdemos-cas = "osdemos.cas:main"
osdemos-cvjoin = "osdemos.cvjoin:main"
osdemos-pc = "osdemos.pc:main"
osdemos-sema = "osdemos.sema:main"
osdemos-rwlock = "osdemos.rwlock:main"
osdemos-dining = "osdemos.dining:main"

[tool.hatch.build.targets.wheel]
packages = ["osdemos"]

[tool.hatch.build.targets.sdist]
include = ["osdemos", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
