[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ossim"
version = "0.1.0"
description = "Simulations of classic operating-system algorithms: CPU and disk scheduling, page replacement, memory fits, the banker's algorithm, readers-writers and small file tools"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating-systems",
    "scheduling",
    "page-replacement",
    "bankers-algorithm",
    "memory-allocation",
    "disk-scheduling",
    "readers-writers",
    "simulation",
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
    "Topic :: Education",
    "Topic :: System :: Operating System",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ossim-cpu = "ossim.cpu_scheduling:main"
ossim-pages = "ossim.page_replacement:main"
ossim-bankers = "ossim.bankers:main"
ossim-memory = "ossim.memory_fit:main"
ossim-disk = "ossim.disk_scheduling:main"
ossim-rw = "ossim.readers_writers:main"
ossim-files = "ossim.file_tools:main"
ossim-copy = "ossim.file_tools:copy_main"
ossim-grep = "ossim.file_tools:grep_main"
ossim-pipe = "ossim.file_tools:pipe_main"

[tool.hatch.build.targets.wheel]
packages = ["ossim"]

[tool.pytest.ini_options]
addopts = "-ra"
